"""
Main Entry Point (Root Level)

Alternative entry point at root level.
"""

from learnpersona.api.main import run

if __name__ == "__main__":
    run()
