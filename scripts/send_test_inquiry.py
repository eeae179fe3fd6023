#!/usr/bin/env python3
"""
Dev helper: send a test contact-form inquiry to the local backend.

Builds an inquiry payload from the command-line options and POST-s it to
the /api/contact endpoint, then prints the response.

Usage
-----
# Basic — sample inquiry targeting localhost:8000
python scripts/send_test_inquiry.py

# Custom submitter
python scripts/send_test_inquiry.py --name "Ada Lovelace" --email ada@example.com

# Include optional fields
python scripts/send_test_inquiry.py --phone 555-1234 --company "Analytical Engines"

# Fill the honeypot field to check that spam is silently dropped
python scripts/send_test_inquiry.py --spam

# Send the CORS preflight instead of the inquiry
python scripts/send_test_inquiry.py --preflight

# Target a different backend URL
python scripts/send_test_inquiry.py --url http://staging.example.com
"""

import argparse
import json
import sys
import textwrap

import httpx


def build_payload(
    name: str,
    email: str,
    phone: str | None = None,
    company: str | None = None,
    spam: bool = False,
) -> dict:
    """Build an inquiry payload; optional fields are left out when not given."""
    payload = {"name": name, "email": email}
    if phone:
        payload["phone"] = phone
    if company:
        payload["company"] = company
    if spam:
        payload["website"] = "http://spam.example.com"
    return payload


def _print_response(response: httpx.Response) -> None:
    status = response.status_code
    symbol = "OK" if status == 200 else "FAIL"
    print(f"\n[{symbol}] HTTP {status}")
    for header in (
        "Access-Control-Allow-Origin",
        "Access-Control-Allow-Methods",
        "Access-Control-Allow-Headers",
    ):
        print(f"  {header}: {response.headers.get(header, '(missing)')}")
    if not response.content:
        return
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="send_test_inquiry.py",
        description="Send a test contact-form inquiry to the contact relay backend.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            Examples:
              python scripts/send_test_inquiry.py
              python scripts/send_test_inquiry.py --spam
              python scripts/send_test_inquiry.py --preflight
              python scripts/send_test_inquiry.py --url http://localhost:8000
        """),
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8000",
        help="Backend base URL (default: http://localhost:8000)",
    )
    parser.add_argument("--name", default="Ada Lovelace", help='Submitter name (default: "Ada Lovelace")')
    parser.add_argument("--email", default="ada@example.com", help="Submitter email (default: ada@example.com)")
    parser.add_argument("--phone", default=None, help="Optional phone number")
    parser.add_argument("--company", default=None, help="Optional company name")
    parser.add_argument(
        "--spam",
        action="store_true",
        help="Fill the honeypot field; the server should answer 200 without sending.",
    )
    parser.add_argument(
        "--preflight",
        action="store_true",
        help="Send an OPTIONS preflight request instead of the inquiry.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the payload JSON without sending it.",
    )

    args = parser.parse_args()

    endpoint = f"{args.url.rstrip('/')}/api/contact"
    payload = build_payload(args.name, args.email, args.phone, args.company, args.spam)

    print(f"Endpoint: {endpoint}")
    if args.dry_run:
        print("\n[DRY RUN] Payload:")
        print(json.dumps(payload, indent=2))
        return 0

    try:
        if args.preflight:
            response = httpx.options(endpoint, timeout=30)
        else:
            response = httpx.post(endpoint, json=payload, timeout=30)
    except httpx.ConnectError:
        print(
            f"\nERROR: Could not connect to {endpoint}\n"
            "Is the backend running? Start it with:\n"
            "  cd backend && uvicorn app.main:app --reload",
            file=sys.stderr,
        )
        return 1
    except httpx.HTTPError as exc:
        print(f"\nERROR: {exc}", file=sys.stderr)
        return 1

    _print_response(response)
    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
