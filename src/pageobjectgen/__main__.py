from __future__ import annotations

import sys


def main() -> int:
    if sys.version_info < (3, 11):
        raise SystemExit(
            "pageobjectgen requires Python 3.11+. "
            f"Current interpreter: {sys.executable} (Python {sys.version.split()[0]})"
        )
    try:
        from .cli import cli
    except ModuleNotFoundError as exc:
        if exc.name in {"bs4", "click", "playwright"}:
            raise SystemExit(
                f"{exc.name} is not installed in this interpreter. "
                "Activate the project venv and run `pip install -e .`."
            ) from exc
        raise

    cli.main(prog_name="pageobjectgen")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
