"""Entry point for the Signup Server.

Intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Usage:
    python run.py
    PORT=8080 python run.py
"""

from signup_server.__main__ import main


if __name__ == "__main__":
    main()
