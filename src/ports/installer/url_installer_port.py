from abc import ABC, abstractmethod
from typing import Optional


class UrlInstallerPort(ABC):
    @abstractmethod
    def install_from_url(
        self,
        url: str,
        silent_args: Optional[str] = None,
        expected_filename: Optional[str] = None,
    ) -> bool:
        """
        Download an installer artifact and run it non-interactively.

        Returns:
            True if the installer exited with code zero

        Raises:
            DownloadError: If the artifact cannot be downloaded
            InstallerResolutionError: If an archive holds no installer
            InstallerError: If the installer cannot be launched
        """
        pass
