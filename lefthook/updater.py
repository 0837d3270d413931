"""Self-update of the lefthook executable from the latest published release."""

from __future__ import annotations

import hashlib
import json
import os
import platform
import sys
import urllib.error
import urllib.request
from contextlib import suppress
from dataclasses import dataclass
from typing import Any

from tqdm import tqdm

from lefthook import log
from lefthook.version import version

LATEST_RELEASE_URL = (
    "https://api.github.com/repos/evilmartians/lefthook/releases/latest"
)
DEFAULT_TIMEOUT = 120.0

_CHECKSUMS_FILENAME = "lefthook_checksums.txt"
_CHECKSUM_FIELDS = 2
_MODE_EXECUTABLE = 0o755
_CHUNK_SIZE = 32 * 1024

_OS_NAMES = {
    "win32": "Windows",
    "darwin": "MacOS",
    "linux": "Linux",
    "freebsd": "Freebsd",
    "openbsd": "Openbsd",
}

_ARCH_NAMES = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "arm64": "arm64",
    "aarch64": "arm64",
    "386": "i386",
    "i386": "i386",
    "i686": "i386",
    "x86": "i386",
}


class UpdateError(Exception):
    """The update could not be completed."""

    def __init__(self, message: str = "update failed") -> None:
        super().__init__(message)


class NoAssetError(UpdateError):
    """The release has no asset for this platform."""

    def __init__(self) -> None:
        super().__init__(
            "couldn't find an asset to download. Please submit an issue "
            "to the lefthook issue tracker"
        )


class InvalidHashsumError(UpdateError):
    """The downloaded file does not match the published checksum."""

    def __init__(self) -> None:
        super().__init__(
            "SHA256 sums differ, it's not safe to use the downloaded binary.\n"
            "If you have problems upgrading lefthook please submit an issue "
            "to the lefthook issue tracker"
        )


@dataclass
class Options:
    """Self-update options."""

    yes: bool = False
    force: bool = False
    exe_path: str = ""


def _os_name() -> str:
    platform_name = sys.platform
    if platform_name.startswith("linux"):
        platform_name = "linux"
    elif platform_name.startswith("freebsd"):
        platform_name = "freebsd"
    elif platform_name.startswith("openbsd"):
        platform_name = "openbsd"
    return _OS_NAMES.get(platform_name, "")


def _arch_name() -> str:
    return _ARCH_NAMES.get(platform.machine().lower(), "")


def _wanted_asset(latest_version: str) -> str:
    name = f"lefthook_{latest_version}_{_os_name()}_{_arch_name()}"
    if sys.platform == "win32":
        name += ".exe"
    return name


def _remove_if_exists(path: str) -> None:
    if not os.path.lexists(path):
        return
    try:
        os.remove(path)
    except OSError as exc:
        log.warnf("Could not remove %s: %s", path, exc)


def _confirmed(latest_version: str) -> bool:
    log.infof(
        "Update %s to %s? %s ",
        log.cyan("lefthook"),
        log.yellow(latest_version),
        log.gray("[Y/n]"),
    )
    answer = sys.stdin.readline().rstrip("\r\n")
    if answer and answer[0] not in ("y", "Y"):
        log.debug("Update rejected")
        return False
    return True


class Updater:
    """Downloads and installs the latest lefthook release."""

    def __init__(
        self,
        release_url: str = LATEST_RELEASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.release_url = release_url
        self.timeout = timeout

    def self_update(self, opts: Options) -> None:
        """Replace the executable at ``opts.exe_path`` with the latest release."""
        try:
            release = self._fetch_latest_release()
        except UpdateError as exc:
            raise UpdateError(f"latest release fetch failed: {exc}") from exc

        latest_version = str(release.get("tag_name") or "").removeprefix("v")

        if latest_version == version(False) and not opts.force:
            log.infof("Up to date: %s\n", latest_version)
            return

        wanted = _wanted_asset(latest_version)
        log.debugf("Searching assets for %s", wanted)

        download_url = ""
        checksum_url = ""
        for asset in release.get("assets") or []:
            if not isinstance(asset, dict):
                continue
            name = asset.get("name")
            url = str(asset.get("browser_download_url") or "")
            if not download_url and name == wanted:
                download_url = url
            if not checksum_url and name == _CHECKSUMS_FILENAME:
                checksum_url = url
            if download_url and checksum_url:
                break

        if not download_url:
            log.warnf(
                "Couldn't find the right asset to download. Wanted: %s\n", wanted
            )
            raise NoAssetError()

        if not checksum_url:
            log.warn("Couldn't find checksums")

        if not opts.yes and not _confirmed(latest_version):
            return

        exe_path = os.path.realpath(opts.exe_path)
        dest_path = f"{exe_path}.{latest_version}"
        backup_path = f"{exe_path}.bak"

        try:
            if not self._download(wanted, download_url, checksum_url, dest_path):
                raise InvalidHashsumError()

            try:
                self._install(exe_path, dest_path, backup_path)
            finally:
                _remove_if_exists(backup_path)
        finally:
            _remove_if_exists(dest_path)

    def _install(self, exe_path: str, dest_path: str, backup_path: str) -> None:
        log.debugf("mv %s %s", exe_path, backup_path)
        try:
            os.replace(exe_path, backup_path)
        except OSError as exc:
            raise UpdateError(
                f"failed to backup lefthook executable: {exc}"
            ) from exc

        log.debugf("mv %s %s", dest_path, exe_path)
        try:
            os.replace(dest_path, exe_path)
        except OSError as exc:
            log.errorf("Failed to replace the lefthook executable: %s", exc)
            self._restore(backup_path, exe_path)
            raise UpdateError() from exc

        log.debugf("chmod +x %s", exe_path)
        try:
            os.chmod(exe_path, _MODE_EXECUTABLE)
        except OSError as exc:
            log.errorf("Failed to set executable file mode: %s", exc)
            self._restore(backup_path, exe_path)
            raise UpdateError() from exc

    @staticmethod
    def _restore(backup_path: str, exe_path: str) -> None:
        try:
            os.replace(backup_path, exe_path)
        except OSError as exc:
            raise UpdateError(f"failed to recover from backup: {exc}") from exc

    def _open(self, url: str, headers: dict[str, str] | None = None) -> Any:
        request = urllib.request.Request(url, headers=headers or {}, method="GET")
        return urllib.request.urlopen(request, timeout=self.timeout)

    def _fetch_latest_release(self) -> dict[str, Any]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        try:
            with self._open(self.release_url, headers) as response:
                body = response.read()
        except (ValueError, OSError) as exc:
            raise UpdateError(f"request failed: {exc}") from exc

        try:
            release = json.loads(body)
        except (ValueError, UnicodeDecodeError) as exc:
            raise UpdateError(f"failed to parse the Github response: {exc}") from exc
        if not isinstance(release, dict):
            raise UpdateError("failed to parse the Github response: not an object")
        return release

    def _download(
        self, name: str, file_url: str, checksum_url: str, path: str
    ) -> bool:
        """Download ``file_url`` to ``path``; return whether its checksum matches."""
        log.debugf("Downloading %s to %s", file_url, path)

        try:
            file_response = self._open(file_url)
        except (ValueError, OSError) as exc:
            raise UpdateError(f"download request failed: {exc}") from exc

        with file_response:
            try:
                checksum_response = self._open(checksum_url)
            except (ValueError, OSError) as exc:
                raise UpdateError(
                    f"checksum download request failed: {exc}"
                ) from exc

            with checksum_response:
                total = 0
                for response in (file_response, checksum_response):
                    with suppress(TypeError, ValueError):
                        total += int(response.headers.get("Content-Length") or 0)

                with tqdm(
                    total=total or None,
                    desc=name,
                    unit="B",
                    unit_scale=True,
                    unit_divisor=1024,
                ) as bar:
                    hasher = hashlib.sha256()
                    try:
                        with open(path, "wb") as file:
                            while chunk := file_response.read(_CHUNK_SIZE):
                                file.write(chunk)
                                hasher.update(chunk)
                                bar.update(len(chunk))
                    except OSError as exc:
                        raise UpdateError(
                            f"failed to download the file: {exc}"
                        ) from exc

                    hashsum = hasher.hexdigest()

                    try:
                        checksums = checksum_response.read().decode(
                            errors="replace"
                        )
                    except OSError as exc:
                        raise UpdateError(
                            f"failed to download checksums: {exc}"
                        ) from exc

                    for line in checksums.splitlines():
                        fields = line.split()
                        if len(fields) < _CHECKSUM_FIELDS:
                            continue
                        log.debugf("Checking %s %s", fields[0], fields[1])
                        if fields[1] == name:
                            if fields[0] == hashsum:
                                log.debugf("Match %s %s", fields[0], fields[1])
                                return True
                            return False

        log.debugf("No matches found for %s %s", name, hashsum)
        return False