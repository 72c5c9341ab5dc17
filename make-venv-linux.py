"""Helper script that creates a development virtual environment on Linux."""

from __future__ import annotations

from pathlib import Path
import subprocess
import sys


def run_command(command: list[str]) -> None:
	subprocess.run(command, check=True)


def main() -> None:
	project_root = Path(__file__).resolve().parent
	venv_path = project_root / ".venv"
	python_exe = sys.executable

	print(f"Using Python interpreter: {python_exe}")
	run_command([python_exe, "-m", "venv", str(venv_path)])

	venv_python = venv_path / "bin" / "python"
	run_command([str(venv_python), "-m", "pip", "install", "--upgrade", "pip"])
	# Editable install with the pytest/httpx extra.
	run_command([str(venv_python), "-m", "pip", "install", "-e", f"{project_root}[test]"])

	print(f"Done. Activate with: source '{venv_path / 'bin' / 'activate'}'")
	print(f"Run the tests with: {venv_python} -m pytest")


if __name__ == "__main__":
	main()
