"""
A simple CLI for setting up the database and running the server.
"""

import sys

import uvicorn


def main():
    try:
        run = sys.argv[1] == "run"
        setup = sys.argv[1] == "setup"
    except IndexError:
        print("Only supported commands are evently run, or evently setup")
        exit(1)

    from evently.config.settings import Settings

    settings = Settings()

    if setup:
        settings.sync_manager().create_all()

        print(f"Setup complete, tables created in {settings.database_db}")
        exit(0)

    if run:
        uvicorn.run(
            "evently.api.app:app",
            host=settings.server_host,
            port=settings.server_port,
        )
        exit(0)

    print("Only supported commands are evently run, or evently setup")
    exit(1)
