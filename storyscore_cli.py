#!/usr/bin/env python3
"""
StoryScore CLI - score user stories from the command line
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from storyscore.analysis.story_analyzer import StoryAnalyzer
from storyscore.config.settings import settings
from storyscore.logging_setup import configure_logging
from storyscore.models.scoring_config import ScoringConfig, ScoringConfigError
from storyscore.reporting.markdown import render_markdown


def _read_text(inline, path, label):
    if inline is not None and path:
        raise ValueError(f"Use either --{label} or --{label}-file, not both")
    if path:
        return Path(path).read_text(encoding="utf-8")
    return inline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storyscore",
        description="StoryScore - clarity and INVEST readiness scoring for user stories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  storyscore analyze --story "As a user, I want to reset my password, so that I can regain access"
  storyscore analyze --story-file story.txt --ac-file criteria.txt --format markdown
  storyscore analyze --story-file story.txt --config scoring.json --output report.json
  storyscore serve --port 3001                # Run the HTTP API
        """
    )

    parser.add_argument(
        'command',
        choices=['analyze', 'serve'],
        help='Command to execute'
    )

    parser.add_argument('--story', help='User story text')
    parser.add_argument('--story-file', help='Path to a file containing the user story')
    parser.add_argument('--ac', help='Acceptance criteria text, one criterion per line')
    parser.add_argument('--ac-file', help='Path to a file containing acceptance criteria')

    parser.add_argument(
        '--format',
        dest='output_format',
        choices=['json', 'markdown'],
        default='json',
        help='Report format (default: json)'
    )

    parser.add_argument(
        '--config',
        dest='config_path',
        help='JSON file overriding scoring thresholds, keywords and weights'
    )

    parser.add_argument('--output', '-o', help='Write the report to this file instead of stdout')

    parser.add_argument('--host', default=settings.api_host, help='Host for the serve command')
    parser.add_argument('--port', type=int, default=settings.api_port, help='Port for the serve command')

    parser.add_argument(
        '--log-level',
        default=settings.log_level,
        help='Logging level (default from LOG_LEVEL, INFO)'
    )

    return parser


def run_analyze(args) -> int:
    """Analyze one story and print or save the report."""
    try:
        story = _read_text(args.story, args.story_file, "story")
        acceptance_criteria = _read_text(args.ac, args.ac_file, "ac") or ""
    except (OSError, ValueError) as e:
        print(f"\n❌ {e}", file=sys.stderr)
        return 2

    config_path = args.config_path or settings.scoring_config_path
    try:
        config = ScoringConfig.from_file(config_path) if config_path else None
    except ScoringConfigError as e:
        print(f"\n❌ {e}", file=sys.stderr)
        return 2

    report = StoryAnalyzer(config).analyze(story, acceptance_criteria)
    output = render_markdown(report) if args.output_format == "markdown" else report.to_json()

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info(f"Saved {args.output_format} report to {args.output}")
        print(f"\n✅ Report saved to {args.output} "
              f"(readiness {report.overall_readiness_score.readiness_rating}%)")
    else:
        print(output)
    return 0


def run_serve(args) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    logger.info(f"Serving StoryScore API on {args.host}:{args.port}")
    uvicorn.run("storyscore.api.main:app", host=args.host, port=args.port, log_level=args.log_level.lower())
    return 0


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == 'serve':
        return run_serve(args)
    return run_analyze(args)


if __name__ == "__main__":
    sys.exit(main())
