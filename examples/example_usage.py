"""Example: use the service layer without Flask.

Controllers are a thin layer; the session, directory and analytics live in the core.
"""

import importlib

from config import get_settings_module

from src.hr_console.hr_console.container import build_container
from src.hr_console.hr_console.session.store import MemoryTokenStore


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_url=settings.API_URL, token_store=MemoryTokenStore())
    container.session.login("admin", "admin")
    container.directory.load()
    print(container.directory.filter("engineering"))
    print(container.attendance_service.history(employee_id=1).to_dict())


if __name__ == "__main__":
    main()
