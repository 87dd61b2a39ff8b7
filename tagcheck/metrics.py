from prometheus_client import Counter, generate_latest

# Check outcome metrics
features_evaluated = Counter(
    "tagcheck_features_evaluated_total",
    "Features handed to a check",
    ["check", "outcome"],  # outcome: flagged | clean | skipped
)

incorrect_tags = Counter(
    "tagcheck_incorrect_tags_total",
    "Offending tag values found",
    ["check", "key"],
)


def render_metrics() -> str:
    """Return the Prometheus text exposition for the host to publish."""
    return generate_latest().decode("utf-8")
