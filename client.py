import argparse
import logging
import sys
from typing import List, Optional

import requests

from algorithms.utils.consts import API_URL, LOG_FORMAT, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


def send_session(transcript: str, url: str = API_URL) -> List[str]:
    """
    Post a session transcript to the server and return its result lines.

    Raises:
        requests.HTTPError: the server rejected the transcript
        requests.RequestException: the server could not be reached
    """
    response = requests.post(
        f"{url.rstrip('/')}/sessions",
        json={"transcript": transcript},
        timeout=REQUEST_TIMEOUT,
    )
    if response.status_code != 200:
        try:
            detail = response.json().get("detail")
        except ValueError:
            detail = response.text
        logger.error("Server error %d: %s", response.status_code, detail)
        response.raise_for_status()
    body = response.json()
    if "processed" in body:
        logger.info("Summary: %d robot(s) processed, %d lost", body["processed"], body["lost"])
    return body["lines"]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run a Martian robots session on the server.")
    parser.add_argument("transcript", help="Path to the session transcript, or '-' for stdin.")
    parser.add_argument("--url", default=API_URL, help=f"Server base URL (default: {API_URL}).")
    args = parser.parse_args(argv)

    if args.transcript == "-":
        transcript = sys.stdin.read()
    else:
        with open(args.transcript, encoding="utf-8") as f:
            transcript = f.read()

    try:
        lines = send_session(transcript, args.url)
    except requests.RequestException as e:
        logger.error("Request failed: %s", e)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    sys.exit(main())

# --- How to Run This Script ---
#
# Start the server first:
#
#    python3 main.py
#
# Then send a transcript, e.g. a file holding:
#
#    5 3
#    1 1 E
#    RFRFRFRF
#    3 2 N
#    FRRFLLFFRRFLL
#
#    python3 client.py session.txt
#    python3 client.py - --url http://localhost:5000 < session.txt
