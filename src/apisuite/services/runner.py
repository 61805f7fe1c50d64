import shutil
import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger

from apisuite.exceptions import RunnerError
from apisuite.models.config import Settings

__all__ = ["SUITES", "SuiteRunner"]

SUITES: dict[str, str] = {
    "jsonplaceholder": "test_jsonplaceholder_api.py",
    "restcountries": "test_restcountries_api.py",
    "httpbin": "test_httpbin_api.py",
    "enhanced": "test_enhanced_api.py",
}


class SuiteRunner:
    """Runs the API suites through pytest and turns the results into an Allure report."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def resolve_suite(self, name: str) -> Path:
        """
        Map a suite name ("httpbin") or file name ("test_httpbin_api.py") to its path.

        Raises:
            RunnerError: If no such suite exists.
        """
        filename = SUITES.get(name, name)
        if filename not in SUITES.values():
            raise RunnerError(
                f"Unknown test suite '{name}'. Available suites: {', '.join(SUITES)}"
            )
        return self.settings.tests_dir / filename

    def _pytest(self, *args: str) -> int:
        cmd = [sys.executable, "-m", "pytest", "--run-e2e", *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        return subprocess.run(cmd, check=False).returncode  # noqa: S603

    def run(self, *targets: Path, extra: tuple[str, ...] = ()) -> bool:
        """
        Run the given test paths, then re-run only the failures up to `rerun_count` times.

        Returns:
            True if the last run passed.
        """
        paths = [str(t) for t in targets] or [str(self.settings.tests_dir)]
        alluredir = f"--alluredir={self.settings.allure_results_dir}"

        code = self._pytest(*paths, alluredir, "--clean-alluredir", *extra)
        reruns = self.settings.rerun_count
        attempt = 0
        while code == pytest.ExitCode.TESTS_FAILED and attempt < reruns:
            attempt += 1
            logger.warning(f"Tests failed, re-running failures ({attempt}/{reruns})")
            code = self._pytest(*paths, alluredir, "--last-failed", *extra)

        if code not in (pytest.ExitCode.OK, pytest.ExitCode.TESTS_FAILED):
            raise RunnerError(f"pytest exited with code {code}")
        return code == pytest.ExitCode.OK

    def run_debug(self) -> bool:
        code = self._pytest(str(self.settings.tests_dir), "-x", "--pdb", "-vv", "-s")
        return code == pytest.ExitCode.OK

    def _allure(self, *args: str) -> None:
        executable = shutil.which("allure")
        if executable is None:
            raise RunnerError(
                "Allure command line not found. Install it from "
                "https://allurereport.org/docs/install/"
            )
        cmd = [executable, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            subprocess.run(cmd, check=True)  # noqa: S603
        except subprocess.CalledProcessError as e:
            raise RunnerError(f"'allure {args[0]}' failed with exit code {e.returncode}") from e

    def generate_report(self) -> Path:
        report_dir = self.settings.allure_report_dir
        self._allure(
            "generate", str(self.settings.allure_results_dir), "--clean", "-o", str(report_dir)
        )
        return report_dir

    def open_report(self) -> None:
        self._allure("open", str(self.settings.allure_report_dir))

    def serve_report(self) -> None:
        self._allure("serve", str(self.settings.allure_results_dir))
