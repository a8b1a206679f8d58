"""
Command-line client for the recommendation server.

Usage:
    python -m shoprec.client <user_id>
"""
from __future__ import annotations

import os
import sys

import httpx

from .env import load_env
from .recommendations.models import UserRecommendations

load_env()

DEFAULT_SERVER_URL = os.getenv("SHOPREC_SERVER_URL", "http://127.0.0.1:9001")


def fetch_user_data(
    user_id: str,
    base_url: str = DEFAULT_SERVER_URL,
    http_client: httpx.Client | None = None,
    timeout: float = 10.0,
) -> UserRecommendations:
    """Ask the server for a user's purchases and recommendations."""
    if http_client is None:
        with httpx.Client(base_url=base_url, timeout=timeout) as owned:
            return fetch_user_data(user_id, http_client=owned)

    resp = http_client.post("/recommendations", json={"user_id": user_id})
    resp.raise_for_status()
    return UserRecommendations.model_validate(resp.json())


def format_user_data(data: UserRecommendations) -> str:
    lines = [f"Products purchased by user {data.user_id}:"]
    if not data.purchased_products:
        lines.append("\tNo purchased products found for this user.")
    for p in data.purchased_products:
        lines.append(f"\tProduct: {p.product_id}, Rating: {p.rating:.2f}, Category: {p.category}")

    lines.append("")
    lines.append(f"Recommendations for user {data.user_id}:")
    if not data.recommendations:
        lines.append("\tNot enough data to generate recommendations.")
    for r in data.recommendations:
        lines.append(f"\tProduct: {r.product_id}, Category: {r.category}")

    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    user_id = args[0] if args else input("Enter user ID: ").strip()
    if not user_id:
        print("A user ID is required.", file=sys.stderr)
        return 1

    try:
        data = fetch_user_data(user_id)
    except httpx.HTTPError as e:
        print(f"Request to {DEFAULT_SERVER_URL} failed: {e}", file=sys.stderr)
        return 1

    print(format_user_data(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())
