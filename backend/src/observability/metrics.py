"""Prometheus metrics for LicenseFlow.

Defines and exposes operational metrics for monitoring and alerting.
"""

from prometheus_client import Counter, Histogram

# License validation metrics
license_validations_total = Counter(
    "licenseflow_license_validations_total",
    "Total license validations run",
    ["license_type", "outcome"]  # outcome: passed|failed|invalid_context
)

license_check_issues_total = Counter(
    "licenseflow_license_check_issues_total",
    "Total errors and warnings reported by license checks",
    ["check", "severity"]  # severity: error|warning
)

license_conflicts_total = Counter(
    "licenseflow_license_conflicts_total",
    "Total conflicts with existing licenses detected",
    ["reason"]
)

license_validation_duration_seconds = Histogram(
    "licenseflow_license_validation_duration_seconds",
    "Time spent running the license validation engine in seconds",
    buckets=[0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


def record_validation_report(license_type: str, report) -> None:
    """Record counters for a completed ValidationReport.

    Args:
        license_type: Candidate license type value
        report: domain.licensing.ValidationReport
    """
    outcome = "passed" if report.overall_passed else "failed"
    license_validations_total.labels(license_type=license_type, outcome=outcome).inc()

    for name, check in report.checks.items():
        if check.errors:
            license_check_issues_total.labels(check=name, severity="error").inc(len(check.errors))
        if check.warnings:
            license_check_issues_total.labels(check=name, severity="warning").inc(len(check.warnings))

    for conflict in report.conflicts:
        license_conflicts_total.labels(reason=conflict.reason.value).inc()
