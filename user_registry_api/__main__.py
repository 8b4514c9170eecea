"""Allow ``python -m user_registry_api`` to start the server."""

from user_registry_api.app.server import main


if __name__ == "__main__":
    main()
