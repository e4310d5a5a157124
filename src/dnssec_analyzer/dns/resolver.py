"""delv invocation for collecting DNSSEC diagnostic text."""

import logging
import subprocess
from typing import Optional

from dnssec_analyzer.dns.records import RESOLUTION_FAILED
from dnssec_analyzer.errors import ProcessError
from dnssec_analyzer.models.records import RecordType

logger = logging.getLogger(__name__)


class DelvResolver:
    """Runs BIND's delv against one nameserver and returns its output."""

    DEFAULT_SERVER = "1.1.1.1"

    def __init__(
        self,
        server: Optional[str] = None,
        delv_path: str = "delv",
        timeout: float = 20.0,
    ):
        """Initialize the resolver.

        Args:
            server: Nameserver address, with or without a leading "@"
            delv_path: delv executable to run
            timeout: Seconds to wait for each query
        """
        self.server = server or self.DEFAULT_SERVER
        self.delv_path = delv_path
        self.timeout = timeout

    @property
    def server(self) -> str:
        return self._server

    @server.setter
    def server(self, value: str) -> None:
        self._server = value.strip().lstrip("@")

    def command(self, domain: str, record_type: RecordType | str) -> list[str]:
        """Build the delv command line for one query."""
        label = record_type.value if isinstance(record_type, RecordType) else record_type
        return [self.delv_path, f"@{self.server}", domain, label]

    def query(self, domain: str, record_type: RecordType | str) -> str:
        """Query one record type for a domain.

        Args:
            domain: Domain name to query
            record_type: Record type or label (e.g. "DNSKEY")

        Returns:
            Text printed by delv

        Raises:
            ProcessError: If delv cannot be started, times out or fails
        """
        cmd = self.command(domain, record_type)
        logger.debug("Running %s", " ".join(cmd))
        try:
            p = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise ProcessError(f"timeout after {self.timeout}s: {' '.join(cmd)}", command=cmd) from e
        except OSError as e:
            raise ProcessError(f"could not run {cmd[0]}: {e}", command=cmd) from e

        output = p.stdout or ""
        stderr = p.stderr or ""
        # delv reports failed resolutions on stderr
        if RESOLUTION_FAILED in stderr and RESOLUTION_FAILED not in output:
            output = stderr.strip() + "\n" + output

        if p.returncode != 0 and RESOLUTION_FAILED not in output:
            detail = stderr.strip() or f"exit status {p.returncode}"
            raise ProcessError(
                f"{' '.join(cmd)} failed: {detail}",
                command=cmd,
                returncode=p.returncode,
            )
        return output
