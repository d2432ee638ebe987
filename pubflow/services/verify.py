"""Verification stage: install the published release into a throwaway venv.

Everything runs from inside a fresh temporary directory, so the import in
the smoke test resolves to the installed distribution and never to the
project's source tree. The directory is removed on every exit path.
"""

from __future__ import annotations

from pathlib import Path

from pubflow.core.package import PackageDescriptor
from pubflow.core.result import Err, Ok, Result
from pubflow.core.target import Target
from pubflow.output.console import Style
from pubflow.platform.files import isolated_directory
from pubflow.platform.process import run
from pubflow.platform.python import venv_python, venv_script

from .base import BaseService
from .errors import VerifyFailed
from .model import SmokeResult, VerifyReport

__all__ = ["VerifyService", "WORKDIR_PREFIX"]

WORKDIR_PREFIX = "pubflow-verify-"

_IMPORT_PROBE = (
    "import importlib, sys; "
    "mod = importlib.import_module(sys.argv[1]); "
    "print(getattr(mod, '__file__', None) or '')"
)


class VerifyService(BaseService):
    def verify(
        self, package: PackageDescriptor, target: Target
    ) -> Result[VerifyReport, VerifyFailed]:
        """Install ``package`` from ``target`` into a new venv and smoke test it.

        Returns:
            Ok(VerifyReport) once the pinned install succeeded
            Err(VerifyFailed) if the workspace, venv, pip upgrade or install fails
        """
        try:
            with isolated_directory(prefix=WORKDIR_PREFIX) as workdir:
                return self._verify_in(workdir, package, target)
        except OSError as e:
            return Err(VerifyFailed(step="workspace", returncode=-1, detail=str(e)))

    def _verify_in(
        self, workdir: Path, package: PackageDescriptor, target: Target
    ) -> Result[VerifyReport, VerifyFailed]:
        venv_dir = workdir / "venv"

        created = self._exec([self._python, "-m", "venv", str(venv_dir)], cwd=workdir)
        if isinstance(created, Err):
            return Err(VerifyFailed(step="venv", returncode=created.error.returncode))

        python = str(venv_python(venv_dir))

        upgraded = self._exec([python, "-m", "pip", "install", "-U", "pip"], cwd=workdir)
        if isinstance(upgraded, Err):
            return Err(VerifyFailed(step="pip", returncode=upgraded.error.returncode))

        install_cmd = [
            python,
            "-m",
            "pip",
            "install",
            "--no-cache-dir",
            *target.pip_index_args,
            package.requirement,
        ]
        installed = self._exec(install_cmd, cwd=workdir)
        if isinstance(installed, Err):
            return Err(
                VerifyFailed(
                    step="install",
                    returncode=installed.error.returncode,
                    detail=package.requirement,
                )
            )

        smoke = self._smoke_test(workdir, venv_dir, package)
        return Ok(VerifyReport(package=package, smoke=smoke))

    def _smoke_test(self, workdir: Path, venv_dir: Path, package: PackageDescriptor) -> SmokeResult:
        """Import the package and try its CLI. Best effort: only ever warns."""
        imported_from: str | None = None
        probe = run(
            [str(venv_python(venv_dir)), "-c", _IMPORT_PROBE, package.import_name],
            cwd=workdir,
        )
        match probe:
            case Ok(stdout):
                imported_from = stdout.strip()
                self._console.print(f"Imported: {imported_from}")
            case Err(error):
                detail = error.stderr.strip().splitlines()
                reason = detail[-1] if detail else str(error)
                self._console.warning(f"could not import {package.import_name}: {reason}")

        script = venv_script(venv_dir, package.entry_point)
        if not script.exists():
            self._console.print(f"  {package.entry_point}: not installed, skipped", Style.DIM)
            return SmokeResult(imported_from=imported_from, entry_point_ran=False)

        ran = self._exec([str(script), "--help"], cwd=workdir, quiet=True)
        if isinstance(ran, Err):
            self._console.print(
                f"  {package.entry_point} --help exited {ran.error.returncode}, ignored",
                Style.DIM,
            )
        return SmokeResult(imported_from=imported_from, entry_point_ran=isinstance(ran, Ok))
