"""Print the attendance dashboard from the command line.

Note: The token is kept in TOKEN_FILE between runs, so log in once with
`--login USER` and later runs reuse the session until the backend rejects it.
"""

from __future__ import annotations

import argparse
import getpass
import importlib
import json

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_console.hr_console.container import build_container
from src.hr_console.hr_console.core.exceptions import ApiError, AuthenticationError, SessionExpiredError
from src.hr_console.hr_console.session.store import FileTokenStore


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--login", metavar="USER", help="sign in before fetching")
    parser.add_argument("--logout", action="store_true", help="forget the stored token and exit")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        api_url=settings.API_URL,
        token_store=FileTokenStore(settings.TOKEN_FILE),
        timeout=settings.REQUEST_TIMEOUT,
        timezone=settings.TIMEZONE,
        fanout_workers=settings.FANOUT_WORKERS,
        debug=settings.DEBUG,
    )

    if args.logout:
        container.session.logout()
        print("OK: Logged out")
        return

    if args.login:
        try:
            container.session.login(args.login, getpass.getpass("Password: "))
        except AuthenticationError as e:
            raise SystemExit(f"Login failed: {e}")

    if not container.session.is_authenticated:
        raise SystemExit("Not signed in. Run with --login USER first.")

    try:
        snapshot = container.attendance_service.load_dashboard()
    except SessionExpiredError:
        raise SystemExit("Session expired. Run with --login USER again.")
    except ApiError as e:
        raise SystemExit(f"Backend error: {e.user_message(str(e))}")

    print(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
