import asyncio
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dotenv import load_dotenv

from icndb import ApiClient, APIRequestError, setup_logger
from icndb.REST import ENDPOINT


def parse_ids(args: list[str]) -> list[int]:
    ids = []
    for arg in args:
        try:
            ids.append(int(arg))
        except ValueError:
            continue
    return ids


async def get_jokes(client: ApiClient, ids: list[int]) -> list[str]:
    if len(ids) == 0:
        try:
            joke = await client.get_random()
        except APIRequestError as e:
            return [e.message]
        return [joke.content]

    lines = []
    for joke_id in ids:
        try:
            joke = await client.get_by_id(joke_id)
            lines.append(f"{joke.id}: {joke.content}")
        except APIRequestError as e:
            lines.append(f"{joke_id}: {e.message}")
    return lines


if __name__ == "__main__":
    load_dotenv()
    if os.getenv("ICNDB_DEBUG"):
        setup_logger()
    client = ApiClient(endpoint=os.getenv("ICNDB_ENDPOINT", ENDPOINT))
    for line in asyncio.run(get_jokes(client, parse_ids(sys.argv[1:]))):
        print(line)
