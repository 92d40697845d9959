#!/usr/bin/env python3
"""
N-gram Suggestion Model Training Script

Train a next-word suggestion model on a text file or the Brown corpus
and try it out interactively.

Usage:
    python train.py --file book.txt --interactive
    python train.py --categories news fiction
    python train.py --list-categories
"""

import argparse
import sys

from nextword.corpus import get_brown_categories, load_brown_corpus, load_text_file
from nextword.model import DEFAULT_TOP_K
from nextword.training import console, train_model_cli, interactive_demo


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Train an n-gram next-word suggestion model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --file book.txt --interactive
  %(prog)s --categories news fiction -k 3
  %(prog)s --list-categories

Without --file the model is trained on the Brown corpus.
        """
    )

    source = parser.add_mutually_exclusive_group()

    source.add_argument(
        '-f', '--file',
        type=str,
        default=None,
        help='Path to a plain text file to train on'
    )

    source.add_argument(
        '-c', '--categories',
        type=str,
        nargs='+',
        default=None,
        help='Brown corpus categories to use (default: all)'
    )

    parser.add_argument(
        '--encoding',
        type=str,
        default='utf-8',
        help='Encoding of --file (default: utf-8)'
    )

    parser.add_argument(
        '-k', '--top-k',
        type=int,
        default=DEFAULT_TOP_K,
        help=f'Candidates shown per context length (default: {DEFAULT_TOP_K})'
    )

    parser.add_argument(
        '-i', '--interactive',
        action='store_true',
        help='Run interactive demo after training'
    )

    parser.add_argument(
        '--list-categories',
        action='store_true',
        help='List available Brown corpus categories and exit'
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.top_k < 1:
        parser.error("--top-k must be at least 1")

    if args.list_categories:
        print("Available Brown corpus categories:")
        for cat in get_brown_categories():
            print(f"  - {cat}")
        return 0

    if args.file:
        try:
            text = load_text_file(args.file, encoding=args.encoding)
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]✗[/red] Could not read {args.file}: {e}")
            return 1
        source = args.file
    else:
        with console.status("[cyan]Loading Brown corpus..."):
            text, corpus_stats = load_brown_corpus(categories=args.categories)
        console.print(f"[green]✓[/green] Loaded {corpus_stats['num_words']:,} words")
        source = "Brown corpus: " + ", ".join(corpus_stats['categories'])

    model = train_model_cli(text, source=source)

    if args.interactive:
        interactive_demo(model, top_k=args.top_k)

    return 0


if __name__ == '__main__':
    sys.exit(main())
