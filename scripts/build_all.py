"""Create the index, load the dataset and build the predecessors dataset in order."""
import sys
import subprocess
from pathlib import Path

SCRIPTS_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPTS_DIR.parent

STEPS = [
    "create_games_index.py",
    "load_games_index.py",
    "enrich_predecessors.py",
]


def main():
    for step in STEPS:
        print(f"\n>>> {step}")
        result = subprocess.run([sys.executable, str(SCRIPTS_DIR / step)], cwd=str(PROJECT_ROOT))
        if result.returncode != 0:
            print(f"ERROR: {step} exited with {result.returncode}, later steps skipped")
            sys.exit(result.returncode)
    print("\n[OK] Index loaded and predecessors dataset written")


if __name__ == "__main__":
    main()
