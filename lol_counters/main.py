"""Console entry-point: run one batch and print the report as JSON on stdout.

Flags:
  --live    require RIOT_API_KEY and collect real matches
  --sample  skip the Riot API and build counters from champion tags

With neither flag the run is live when an API key is configured and falls
back to sample mode otherwise.
"""
from __future__ import annotations

import asyncio
import json
import sys
from typing import List, Optional

from lol_counters.application import BuildCounterStatsUseCase, CounterReport
from lol_counters.config import settings
from lol_counters.core.logging import bootstrap_logging, get_logger, shutdown_logging
from lol_counters.domain.enums import Region
from lol_counters.infrastructure import CatalogueUnavailableError, DataDragonClient, RiotAPIClient

log = get_logger(__name__, service="counters-cli")


def use_sample_mode(argv: List[str]) -> bool:
    if "--sample" in argv:
        return True
    if "--live" in argv:
        settings.validate()
        return False
    if not settings.RIOT_API_KEY:
        log.warning("RIOT_API_KEY is not set, falling back to sample counters")
        return True
    return False


async def run(sample: bool = False) -> CounterReport:
    async with DataDragonClient() as ddragon:
        if sample:
            return await BuildCounterStatsUseCase(None, ddragon).execute()
        region = Region.from_string(settings.TARGET_REGION)
        async with RiotAPIClient(settings.RIOT_API_KEY, region) as api_client:
            return await BuildCounterStatsUseCase(api_client, ddragon).execute()


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    bootstrap_logging(service="counters", level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
    try:
        try:
            report = asyncio.run(run(sample=use_sample_mode(argv)))
        except (ValueError, CatalogueUnavailableError) as exc:
            log.error(f"Run aborted: {exc}")
            return 1
        log.success(lambda: (
            f"{report.metadata.mode}: {report.metadata.matches_processed} matches, "
            f"{report.metadata.matchups_extracted} matchups, "
            f"{report.metadata.api_calls} API calls"
        ))
        json.dump(report.to_dict(), sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return 0
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
