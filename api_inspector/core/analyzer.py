"""
API Analyzer — Main orchestrator for one analysis run.

Full pipeline:
1. Validate the service URL (no network activity on failure)
2. Select the rules in scope for the source filter
3. Probe candidate endpoints
4. Run the rule engine → violations
5. Score, synthesize recommendations, assemble the report

Any failure after validation aborts the run with AnalysisError; a partial
report is never returned.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping, Sequence

import httpx

from api_inspector.config import settings
from api_inspector.core.catalog import DESIGN_RULES, SOURCE_RULE_MAP
from api_inspector.core.errors import AnalysisError, InvalidServiceUrlError
from api_inspector.core.evaluation import EvaluationContext
from api_inspector.core.prober import EndpointProber, validate_service_url
from api_inspector.core.report import assemble_report
from api_inspector.core.rule_engine import RuleEngine
from api_inspector.core.rule_selector import ALL_SOURCES, select_rules
from api_inspector.models.analysis_models import AnalysisResult
from api_inspector.models.probe_models import AuthConfig
from api_inspector.models.rule_models import DesignRule

logger = logging.getLogger("api_inspector.analyzer")


class ApiAnalyzer:
    """
    Analysis pipeline orchestrator.

    Ties together: rule selection → endpoint probing → rule engine →
    scoring → report assembly. Holds only read-only state, so one instance
    can serve concurrent runs.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        verify_host: bool | None = None,
        engine: RuleEngine | None = None,
        catalog: Sequence[DesignRule] = DESIGN_RULES,
        source_map: Mapping[str, frozenset[str]] = SOURCE_RULE_MAP,
    ) -> None:
        self.transport = transport
        self.verify_host = verify_host
        self.engine = engine or RuleEngine()
        self.catalog = catalog
        self.source_map = source_map

    def prober(self, auth: AuthConfig | None = None) -> EndpointProber:
        return EndpointProber(auth=auth, transport=self.transport, verify_host=self.verify_host)

    async def analyze(
        self,
        service_url: str | None,
        source_filter: str = ALL_SOURCES,
        auth: AuthConfig | None = None,
        timeout: float | None = None,
    ) -> AnalysisResult:
        """
        Analyze one service.

        Args:
            service_url: Absolute http(s) URL of the API.
            source_filter: Rule source key, or "all".
            auth: Credentials attached to every probe.
            timeout: Deadline in seconds; defaults to analysis_timeout_seconds.

        Returns:
            The scored AnalysisResult.

        Raises:
            InvalidServiceUrlError: service_url is missing or malformed.
            AnalysisError: probing or evaluation failed, or the deadline passed.
        """
        base_url = validate_service_url(service_url)
        deadline = timeout if timeout is not None else settings.analysis_timeout_seconds

        try:
            return await asyncio.wait_for(
                self._run(service_url, base_url, source_filter, auth), timeout=deadline
            )
        except asyncio.TimeoutError as e:
            raise AnalysisError(f"analysis exceeded {deadline:g}s deadline") from e
        except (AnalysisError, InvalidServiceUrlError):
            raise
        except Exception as e:
            raise AnalysisError(str(e) or type(e).__name__) from e

    async def _run(
        self,
        service_url: str,
        base_url: str,
        source_filter: str,
        auth: AuthConfig | None,
    ) -> AnalysisResult:
        start = time.monotonic()
        rules = select_rules(source_filter, self.catalog, self.source_map)
        logger.info(f"Analyzing {base_url} with {len(rules)} rule(s) (source={source_filter})")

        endpoints = await self.prober(auth).discover(base_url)

        ctx = EvaluationContext(
            service_url=base_url,
            endpoints=tuple(endpoints),
            rules=rules,
            credentials_supplied=bool(auth and auth.supplied),
        )
        result = self.engine.run(ctx)
        # the report echoes the URL as the caller wrote it
        report = assemble_report(service_url, rules, result.violations)

        elapsed = (time.monotonic() - start) * 1000
        logger.info(
            f"Analysis of {base_url} complete: {len(endpoints)} endpoint(s), "
            f"{len(result.violations)} violation(s), score {report.overall_score} "
            f"in {elapsed:.0f}ms"
        )
        return report
