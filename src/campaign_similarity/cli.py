#!/usr/bin/env python3
"""
Command-line interface for campaign similarity.

Usage:
    campaign-similarity similar campaigns.json --id 1 --limit 3
    campaign-similarity similar campaigns.json --id 1 --third-axis progress
    campaign-similarity groups campaigns.json --threshold 0.7
    campaign-similarity groups campaigns.json --strategy connected_components
    campaign-similarity explain campaigns.json --id 1 --other 2
    campaign-similarity sections campaigns.json
    campaign-similarity status
    campaign-similarity --json groups campaigns.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from typing import Any, Optional

logger = logging.getLogger("campaign_similarity.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load(path: str):
    from .fixtures import load_campaigns

    return load_campaigns(path)


def _emit_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def _get_service():
    from .services.similarity import get_similarity_service

    return get_similarity_service()


def cmd_similar(args: argparse.Namespace) -> int:
    """Rank campaigns similar to one campaign."""
    campaigns = _load(args.file)
    service = _get_service()

    weights = None
    if args.third_axis == "progress" and not args.keep_weights:
        from .core.models import MetricWeights

        weights = MetricWeights.equal()

    results = service.find_similar(
        campaigns,
        args.id,
        limit=args.limit,
        weights=weights,
        third_axis=args.third_axis,
    )

    if args.json:
        _emit_json([r.model_dump(mode="json", by_alias=True) for r in results])
        return 0

    if not results:
        print(f"No similar campaigns found for campaign {args.id}")
        return 0

    print(f"\nCampaigns similar to #{args.id}")
    print("=" * 50)
    for rank, result in enumerate(results, 1):
        details = result.details
        third = details.progress if details.progress is not None else details.category
        print(
            f"{rank}. [{result.campaign.id}] {result.campaign.title}: "
            f"{result.score:.1%} ({result.label})"
        )
        print(
            f"   target {details.target:.1%} | deadline {details.deadline:.1%} | "
            f"{args.third_axis or service.settings.third_axis.value} {third or 0.0:.1%}"
        )
    return 0


def cmd_groups(args: argparse.Namespace) -> int:
    """Group campaigns by similarity."""
    campaigns = _load(args.file)
    result = _get_service().group(campaigns, threshold=args.threshold, strategy=args.strategy)

    if args.json:
        _emit_json(result.model_dump(mode="json", by_alias=True))
        return 0

    print(f"\nSimilarity Groups (threshold {result.threshold:.2f}, {result.strategy})")
    print("=" * 50)
    for group in result.groups:
        print(f"{group.name} ({group.size} campaigns)")
        print(f"  Average target: {group.average_target:.4g}")
        for campaign in group.campaigns:
            print(f"  - [{campaign.id}] {campaign.title} | target {campaign.target}")
    if result.other:
        print("Other campaigns")
        for campaign in result.other:
            print(f"  - [{campaign.id}] {campaign.title} | target {campaign.target}")
    return 0


def cmd_explain(args: argparse.Namespace) -> int:
    """Explain the similarity of two campaigns."""
    campaigns = _load(args.file)
    compared = _get_service().compare(campaigns, args.id, args.other)

    if compared is None:
        logger.error("Campaign %d or %d not found in %s", args.id, args.other, args.file)
        return 1

    similarity, explanation = compared
    if args.json:
        _emit_json({"similarity": similarity.model_dump(mode="json"), "explanation": explanation})
    else:
        print(explanation)
    return 0


def cmd_sections(args: argparse.Namespace) -> int:
    """List campaigns by target range with their status."""
    from .services.campaigns import (
        get_collection_stats,
        group_by_target_range,
        summarize_campaign,
    )

    campaigns = _load(args.file)
    now = int(time.time()) if args.now is None else args.now
    stats = get_collection_stats(campaigns, now=now)
    sections = group_by_target_range(campaigns)

    if args.json:
        _emit_json(
            {
                "stats": stats.model_dump(mode="json"),
                "sections": {
                    label: [
                        summarize_campaign(c, now=now).model_dump(mode="json", by_alias=True)
                        for c in members
                    ]
                    for label, members in sections.items()
                },
            }
        )
        return 0

    print("\nCampaigns by Target")
    print("=" * 50)
    print(f"Total campaigns: {stats.total_campaigns}")
    print(f"Total raised: {stats.total_raised}")
    print(f"Active: {stats.active_campaigns} | Claimed: {stats.claimed_campaigns}")
    for label, members in sections.items():
        print(f"\n{label}")
        for campaign in members:
            summary = summarize_campaign(campaign, now=now)
            print(
                f"  - [{campaign.id}] {campaign.title} | {summary.progress_percent:.1f}% | "
                f"{summary.status.value} | {summary.time_left}"
            )
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    """Show the effective similarity configuration."""
    status = _get_service().get_status()

    if args.json:
        _emit_json(status)
        return 0

    methodology = status["methodology"]
    print("\nSimilarity Configuration")
    print("=" * 50)
    print(f"Metrics: {', '.join(methodology['metrics'])}")
    for name, weight in methodology["weights"].items():
        print(f"  {name}: {weight:.3f}")
    print(f"Deadline window: {methodology['deadline_window_days']:g} days")
    print(f"Grouping: {methodology['grouping']} (threshold {methodology['threshold']:.2f})")
    print(f"Default limit: {methodology['default_limit']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campaign-similarity",
        description="Rank and group crowdfunding campaigns by similarity",
    )
    parser.add_argument("--json", action="store_true", help="Print machine-readable JSON")
    parser.add_argument("--log-level", default=None, help="Log level (default: settings.log_level)")

    subparsers = parser.add_subparsers(dest="command")

    similar_parser = subparsers.add_parser("similar", help="Rank campaigns similar to one campaign")
    similar_parser.add_argument("file", help="JSON campaign snapshot")
    similar_parser.add_argument("--id", type=int, required=True, help="Focal campaign id")
    similar_parser.add_argument("--limit", type=int, default=None, help="Maximum results")
    similar_parser.add_argument(
        "--third-axis",
        choices=["category", "progress"],
        default=None,
        help="Third metric (progress switches to equal weights)",
    )
    similar_parser.add_argument(
        "--keep-weights",
        action="store_true",
        help="Keep configured weights when using --third-axis progress",
    )
    similar_parser.set_defaults(func=cmd_similar)

    groups_parser = subparsers.add_parser("groups", help="Group campaigns by similarity")
    groups_parser.add_argument("file", help="JSON campaign snapshot")
    groups_parser.add_argument("--threshold", type=float, default=None, help="Grouping threshold")
    groups_parser.add_argument(
        "--strategy",
        choices=["complete_linkage", "connected_components"],
        default=None,
        help="Grouping strategy",
    )
    groups_parser.set_defaults(func=cmd_groups)

    explain_parser = subparsers.add_parser("explain", help="Explain the similarity of two campaigns")
    explain_parser.add_argument("file", help="JSON campaign snapshot")
    explain_parser.add_argument("--id", type=int, required=True, help="First campaign id")
    explain_parser.add_argument("--other", type=int, required=True, help="Second campaign id")
    explain_parser.set_defaults(func=cmd_explain)

    sections_parser = subparsers.add_parser("sections", help="List campaigns by target range")
    sections_parser.add_argument("file", help="JSON campaign snapshot")
    sections_parser.add_argument("--now", type=int, default=None, help="Reference Unix time")
    sections_parser.set_defaults(func=cmd_sections)

    status_parser = subparsers.add_parser("status", help="Show similarity configuration")
    status_parser.set_defaults(func=cmd_status)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        if args.log_level:
            _configure_logging(args.log_level)
        else:
            from .core.config import get_settings

            _configure_logging(get_settings().log_level)

        return args.func(args)
    except FileNotFoundError as e:
        logger.error("File not found: %s", e.filename)
        return 1
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", getattr(args, "file", "?"), e)
        return 1
    except ValueError as e:
        logger.error("Invalid input: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
