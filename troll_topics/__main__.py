"""
CLI entry point for the troll tweet topic analysis.

Output layout:
    data/processed/runs/
    └── {YYYYMMDD_HHMMSS}_topics/
        ├── summary.json          # descriptive statistics + load report
        ├── topics.json           # topic model info and top words
        ├── doc_topics.csv        # per-tweet topic proportions and assignment
        ├── hashtag_edges.csv     # hashtag co-occurrence edge list
        ├── dtm/                  # trimmed document-term matrix
        └── model/                # topic model arrays

Usage:
    python -m troll_topics --tweets data/raw/tweets.csv --users data/raw/users.csv
    python -m troll_topics --tweets data/raw/tweets.csv --num-topics 15 --min-count 10
    python -m troll_topics --tweets data/raw/tweets.csv --seed 7 --quiet
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import pandas as pd

from troll_topics.config import settings
from troll_topics.features.document_term import cooccurrence_edges
from troll_topics.features.topic_modeling import TopicModelingAnalyzer
from troll_topics.pipeline import PipelineResult, TrollTopicsPipeline

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _apply_overrides(args: argparse.Namespace) -> None:
    """
    Copy CLI overrides onto the global settings.

    Raises:
        ValueError: If an override fails the field constraints
    """
    model = settings.topic_modeling.model
    trimming = settings.preprocessing.trimming
    if args.num_topics is not None:
        model.num_topics = args.num_topics
    if args.max_iterations is not None:
        model.max_iterations = args.max_iterations
    if args.seed is not None:
        model.random_state = args.seed
    if args.min_count is not None:
        trimming.min_count = args.min_count
    if args.min_docfreq is not None:
        trimming.min_docfreq = args.min_docfreq


def _write_outputs(result: PipelineResult, run_dir: Path) -> None:
    """Persist the run's results into run_dir."""
    output = settings.topic_modeling.output
    analyzer = TopicModelingAnalyzer(
        result.topic_model,
        min_probability=settings.topic_modeling.features.min_probability,
        dominant_threshold=settings.topic_modeling.features.dominant_threshold,
    )

    with open(run_dir / "summary.json", 'w', encoding='utf-8') as fh:
        json.dump({
            'tweets': result.tweets.summary(),
            'users': result.users.summary() if result.users else None,
            'vocabulary_size': result.dtm.n_terms,
            'trimmed_vocabulary_size': result.trimmed_dtm.n_terms,
            'warnings': result.warnings,
            'corpus': result.summary.model_dump(mode='json'),
        }, fh, indent=2, ensure_ascii=False)

    info = result.topic_model.to_model_info(num_words=output.num_topic_words)
    with open(run_dir / "topics.json", 'w', encoding='utf-8') as fh:
        json.dump(info.model_dump(mode='json'), fh, indent=2, ensure_ascii=False)

    doc_topics = pd.concat(
        [analyzer.topic_assignments(), result.topic_model.doc_topics_frame().round(output.precision)],
        axis=1,
    )
    doc_topics.to_csv(run_dir / "doc_topics.csv", index=False)

    cooccurrence_edges(result.trimmed_dtm, pattern="#*").to_csv(
        run_dir / "hashtag_edges.csv", index=False
    )

    result.trimmed_dtm.save(run_dir / "dtm")
    result.topic_model.save(run_dir / "model")


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Troll tweet analysis: Load -> Tokenize -> DTM -> Trim -> LDA"
    )
    ap.add_argument('--tweets', type=str, default=None,
                    help='Tweet CSV export (default: data/raw/tweets.csv)')
    ap.add_argument('--users', type=str, default=None,
                    help='Optional user CSV export')
    ap.add_argument('--num-topics', type=int, default=None, dest='num_topics',
                    help='Number of topics (default: from config)')
    ap.add_argument('--max-iterations', type=int, default=None, dest='max_iterations',
                    help='Maximum passes over the corpus (default: from config)')
    ap.add_argument('--seed', type=int, default=None,
                    help='Random seed (default: from config)')
    ap.add_argument('--min-count', type=int, default=None, dest='min_count',
                    help='Minimum total term count kept by trimming')
    ap.add_argument('--min-docfreq', type=int, default=None, dest='min_docfreq',
                    help='Minimum document frequency kept by trimming')
    ap.add_argument('--output-dir', type=str, default=None, dest='output_dir',
                    help='Base output directory (default: data/processed/runs)')
    ap.add_argument('--quiet', action='store_true', help='Minimize console output')
    args = ap.parse_args()

    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    pipeline = TrollTopicsPipeline(settings)
    try:
        _apply_overrides(args)
        pipeline.validate()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(2)

    tweets_path = Path(args.tweets) if args.tweets else settings.paths.tweets_file
    users_path = Path(args.users) if args.users else None

    output_base = Path(args.output_dir) if args.output_dir else settings.paths.runs_dir
    try:
        result = pipeline.run(tweets_path, users_path)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Pipeline failed: %s", exc)
        sys.exit(1)

    run_dir = output_base / f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_topics"
    run_dir.mkdir(parents=True, exist_ok=True)

    _write_outputs(result, run_dir)

    if not args.quiet:
        analyzer = TopicModelingAnalyzer(result.topic_model)
        analyzer.print_topics(num_words=settings.topic_modeling.output.num_topic_words)
        print(f"\nTweets loaded:  {result.tweets.rows_loaded}")
        print(f"Rows skipped:   {result.rows_skipped}")
        print(f"Vocabulary:     {result.dtm.n_terms} -> {result.trimmed_dtm.n_terms} terms")
        print(f"Converged:      {result.topic_model.converged}")
        for warning in result.warnings:
            print(f"WARNING: {warning}")
        print(f"\nRun directory: {run_dir}")


if __name__ == '__main__':
    main()
