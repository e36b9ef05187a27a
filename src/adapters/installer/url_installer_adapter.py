"""
Direct-download installer adapter: fetch, unpack and run installers silently.
"""

import logging
import os
import shlex
import shutil
import subprocess
import tempfile
import urllib.error
import urllib.request
import zipfile
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from typing_extensions import override

from src.exceptions import DownloadError, InstallerError, InstallerResolutionError
from src.ports.installer.url_installer_port import UrlInstallerPort

INSTALLER_EXTENSIONS = (".exe", ".msi")
ARCHIVE_EXTENSIONS = (".zip",)
DEFAULT_FILENAME = "download.bin"
_CHUNK_SIZE = 1024 * 1024


def filename_from_url(url: str) -> str:
    """Last path segment of the URL, or a generic name when it has none."""
    name = os.path.basename(unquote(urlparse(url).path))
    return name or DEFAULT_FILENAME


def is_archive(path: Path) -> bool:
    return path.suffix.lower() in ARCHIVE_EXTENSIONS


def select_installer(directory: Path) -> Path:
    """
    Pick the installer to run among extracted archive contents.

    Policy: the largest file with an installer extension wins; equal sizes are
    broken by path order. An archive shipping several installers may therefore
    resolve to the wrong one.

    Raises:
        InstallerResolutionError: If no installer-like file exists
    """
    candidates = [
        p
        for p in directory.rglob("*")
        if p.is_file() and p.suffix.lower() in INSTALLER_EXTENSIONS
    ]
    if not candidates:
        raise InstallerResolutionError(
            f"No installer ({', '.join(INSTALLER_EXTENSIONS)}) found in {directory}"
        )
    candidates.sort(key=lambda p: (-p.stat().st_size, str(p)))
    return candidates[0]


def build_command(installer: Path, silent_args: Optional[str]) -> list[str]:
    """Command line that runs the installer with its silent arguments."""
    args = shlex.split(silent_args, posix=os.name != "nt") if silent_args else []
    if installer.suffix.lower() == ".msi":
        return ["msiexec", "/i", str(installer), *args]
    return [str(installer), *args]


class UrlFallbackInstaller(UrlInstallerPort):
    """Installs applications from a direct download URL."""

    def __init__(
        self,
        download_dir: Optional[str] = None,
        user_agent: str = "gpu-bench-installer/0.1",
        timeout: Optional[float] = None,
        keep_downloads: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the installer.

        Args:
            download_dir: Parent directory for per-install scratch directories
            user_agent: User-Agent header sent with downloads
            timeout: Socket timeout for downloads in seconds (None blocks indefinitely)
            keep_downloads: Leave scratch directories in place after the install
            logger: Logger instance to use for logging
        """
        self.download_dir = download_dir or tempfile.gettempdir()
        self.user_agent = user_agent
        self.timeout = timeout
        self.keep_downloads = keep_downloads
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _make_scratch_dir(self) -> Path:
        os.makedirs(self.download_dir, exist_ok=True)
        return Path(tempfile.mkdtemp(prefix="bench-install-", dir=self.download_dir))

    def download(self, url: str, destination: Path) -> Path:
        """
        Stream the resource at url into destination.

        Raises:
            DownloadError: If the URL is invalid or the transfer fails
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise DownloadError(f"Unsupported download URL: {url}")

        headers = {"User-Agent": self.user_agent, "Accept": "*/*"}
        req = urllib.request.Request(url, headers=headers, method="GET")
        kwargs = {"timeout": self.timeout} if self.timeout else {}
        self._logger.info(f"Downloading {url}")
        try:
            with urllib.request.urlopen(req, **kwargs) as resp:  # nosec - catalog-controlled URL
                with open(destination, "wb") as fh:
                    shutil.copyfileobj(resp, fh, _CHUNK_SIZE)
        except urllib.error.HTTPError as e:
            raise DownloadError(f"HTTP error {e.code} downloading {url}: {e.reason}")
        except urllib.error.URLError as e:
            raise DownloadError(f"URL error downloading {url}: {e.reason}")
        except OSError as e:
            raise DownloadError(f"Download of {url} failed: {e}")

        self._logger.info(
            f"Saved {destination.name} ({destination.stat().st_size} bytes)"
        )
        return destination

    def extract(self, archive: Path, target: Path) -> Path:
        """Unpack a ZIP archive into target."""
        try:
            with zipfile.ZipFile(archive) as zf:
                zf.extractall(target)
        except zipfile.BadZipFile as e:
            raise InstallerResolutionError(f"Cannot extract {archive.name}: {e}")
        return target

    def resolve_installer(self, artifact: Path, work_dir: Path) -> Path:
        """Turn a downloaded artifact into the file to execute."""
        if not is_archive(artifact):
            return artifact
        extracted = self.extract(artifact, work_dir / "extracted")
        installer = select_installer(extracted)
        self._logger.info(f"Selected {installer.name} from {artifact.name}")
        return installer

    def run_installer(self, installer: Path, silent_args: Optional[str]) -> int:
        """Run the installer and wait for it to exit."""
        cmd = build_command(installer, silent_args)
        self._logger.info(f"Running installer: {' '.join(cmd)}")
        try:
            completed = subprocess.run(cmd, cwd=str(installer.parent), check=False)
        except OSError as e:
            raise InstallerError(f"Failed to launch {installer.name}: {e}")
        return completed.returncode

    @override
    def install_from_url(
        self,
        url: str,
        silent_args: Optional[str] = None,
        expected_filename: Optional[str] = None,
    ) -> bool:
        work_dir = self._make_scratch_dir()
        try:
            artifact = work_dir / (expected_filename or filename_from_url(url))
            self.download(url, artifact)
            installer = self.resolve_installer(artifact, work_dir)
            exit_code = self.run_installer(installer, silent_args)
            if exit_code != 0:
                self._logger.warning(
                    f"Installer {installer.name} exited with code {exit_code}"
                )
                return False
            return True
        finally:
            if self.keep_downloads:
                self._logger.info(f"Keeping downloads in {work_dir}")
            else:
                shutil.rmtree(work_dir, ignore_errors=True)
