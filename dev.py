"""Development script: format, lint, test, then generate schemas from the test fixtures."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally a sample generation."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample schema generation."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping generation"
    )
    parser.add_argument(
        "--dest", default="build/schema", help="Where the sample generation writes its output"
    )
    args = parser.parse_args()

    if not args.ci:
        run_command(["ruff", "format"], "Ruff Formatting")
        run_command(["ruff", "check", "--fix"], "Ruff Linting & Fixes")
    else:
        run_command(["ruff", "check"], "Ruff Linting")

    run_command([sys.executable, "-m", "pytest"], "Tests")
    if args.ci:
        print("\n✅ CI checks passed successfully. Skipping schema generation.")
        return

    run_command(
        [
            sys.executable,
            "-m",
            "catalog_schema.generate_schema",
            "tests/fixtures",
            args.dest,
            "--editor",
        ],
        "Sample Generation",
    )

    print(f"\n✅ All development checks passed; sample schemas are in {args.dest}.")


if __name__ == "__main__":
    main()
