import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent


def _run_script(script: str, extra_args: list[str] | None = None) -> None:
    cmd = [sys.executable, str(ROOT / script)]
    if extra_args:
        cmd.extend(extra_args)
    print(f"\nRunning: {' '.join(cmd)}")
    subprocess.run(cmd, check=True)


def run_simulation() -> None:
    _run_script("main.py")
    print("\nSimulation completed.")


def run_invite_sweep() -> None:
    start = input("Smallest invited count to compare [100]: ").strip()
    sweep_args = ["--start", start] if start else []
    _run_script("analytics/data_analysis/invite_sweep.py", sweep_args)
    print("\nInvite sweep completed.")


def main() -> None:
    while True:
        print("\nChoose pipeline:")
        print("1) Run simulation")
        print("2) Compare invited counts")
        print("3) Exit")
        choice = input("Enter 1, 2 or 3: ").strip()

        if choice == "1":
            run_simulation()
        elif choice == "2":
            run_invite_sweep()
        elif choice == "3":
            print("Exiting pipeline menu.")
            break
        else:
            print("Invalid choice. Please select 1, 2 or 3.")


if __name__ == "__main__":
    main()
