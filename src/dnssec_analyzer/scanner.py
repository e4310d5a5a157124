"""Scan orchestration: resolve, parse and collect every record type for a URL."""

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from datetime import datetime
from typing import Callable, Iterable, Optional, Protocol

from dnssec_analyzer.config import Settings
from dnssec_analyzer.dns.denial import parse_denial_of_existence
from dnssec_analyzer.dns.extractor import extract_domain
from dnssec_analyzer.dns.records import get_parser
from dnssec_analyzer.dns.resolver import DelvResolver
from dnssec_analyzer.errors import ScanError
from dnssec_analyzer.models.assessment import Assessment, utcnow
from dnssec_analyzer.models.records import DenialOfExistence, RecordResult, RecordType

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    def query(self, domain: str, record_type: RecordType | str) -> str:
        ...


class Scanner:
    """Builds an Assessment for a URL, one resolver query per record type."""

    def __init__(
        self,
        resolver: Optional[Resolver] = None,
        record_types: Optional[Iterable[RecordType | str]] = None,
        workers: int = 1,
        clock: Callable[[], datetime] = utcnow,
    ):
        """Initialize the scanner.

        Args:
            resolver: Object with a ``query(domain, record_type)`` method.
                Defaults to a DelvResolver.
            record_types: Types to collect. Defaults to all supported types.
            workers: Number of queries to run in parallel
            clock: Source of the start/end instants
        """
        self.resolver = resolver or DelvResolver()
        self.record_types = [
            t if isinstance(t, RecordType) else RecordType.from_label(t)
            for t in (record_types or list(RecordType))
        ]
        self.workers = max(1, int(workers))
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "Scanner":
        resolver = DelvResolver(
            server=settings.dns_server,
            delv_path=settings.delv_path,
            timeout=settings.timeout,
        )
        return cls(resolver=resolver, record_types=settings.record_types, workers=settings.workers)

    def query_and_parse(self, domain: str, record_type: RecordType) -> RecordResult:
        """Query one record type and parse the response."""
        logger.debug("Querying %s %s", domain, record_type.value)
        response = self.resolver.query(domain, record_type)
        return get_parser(record_type).parse(response)

    def scan(self, url: str) -> Assessment:
        """Scan every configured record type for a URL.

        Any failure aborts the whole scan; no partial assessment is returned.

        Args:
            url: URL or hostname to assess

        Returns:
            Completed Assessment

        Raises:
            ExtractionError: If no domain can be extracted from the URL
            ProcessError: If the resolver could not run
            ResolutionFailedError: If a query could not be resolved
            FormatError: If a response could not be parsed
        """
        domain = extract_domain(url)
        assessment = Assessment(url=url, domain=domain)
        assessment.begin(self._clock())
        logger.info("Scanning %s (%s)", domain, url)

        try:
            if self.workers > 1:
                results = self._scan_parallel(domain)
            else:
                results = {t: self.query_and_parse(domain, t) for t in self.record_types}
        except ScanError as e:
            logger.warning("Scan for %s failed: %s", domain, e)
            raise

        for record_type in self.record_types:
            assessment.records[record_type.value] = results[record_type]

        assessment.finish(self._clock())
        logger.info(
            "Scan for %s finished in %.0fms, validated=%s",
            domain, assessment.duration_ms, assessment.is_validated,
        )
        return assessment

    def _scan_parallel(self, domain: str) -> dict[RecordType, RecordResult]:
        executor = ThreadPoolExecutor(max_workers=self.workers)
        try:
            futures = {
                executor.submit(self.query_and_parse, domain, t): t
                for t in self.record_types
            }
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)
            for future in done:
                error = future.exception()
                if error is not None:
                    raise error
            return {t: f.result() for f, t in futures.items()}
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

    def scan_denial(self, url: str) -> DenialOfExistence:
        """Collect NSEC and NSEC3PARAM for a URL, tolerating a failed half.

        Raises:
            ExtractionError: If no domain can be extracted from the URL
            ProcessError: If the resolver could not run
        """
        domain = extract_domain(url)
        nsec = self.resolver.query(domain, RecordType.NSEC)
        nsec3param = self.resolver.query(domain, RecordType.NSEC3PARAM)
        return parse_denial_of_existence(nsec, nsec3param)
