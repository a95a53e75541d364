"""Prometheus metrics for state table builds and placements."""

from prometheus_client import Counter, Histogram

STATE_TABLES_BUILT = Counter(
    "mcstate_state_tables_built_total",
    "State tables built, by behavior family",
    ["family"],
)

STATE_TABLE_BUILD_SECONDS = Histogram(
    "mcstate_state_table_build_seconds",
    "Time spent building a state table",
)

PLACEMENTS_RESOLVED = Counter(
    "mcstate_placements_resolved_total",
    "State ids computed for block placements, by block name",
    ["block"],
)

MERGE_DECISIONS = Counter(
    "mcstate_merge_decisions_total",
    "Updateable checks, by outcome",
    ["outcome"],
)
