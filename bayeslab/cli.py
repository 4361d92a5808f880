#!/usr/bin/env python3
"""Train a naive Bayes model on a CSV file and report held-out accuracy."""

import argparse

import numpy as np
import pandas as pd
from sklearn.metrics import classification_report
from sklearn.model_selection import train_test_split

from bayeslab.naive_bayes import GaussianNB, MultinomialNB
from bayeslab.text import TextVectorizer


def build_parser():
    parser = argparse.ArgumentParser(prog='bayeslab', description=__doc__)
    parser.add_argument('--data', required=True, help='CSV file with one row per sample')
    parser.add_argument('--label', required=True, help='column holding the class labels')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--text', help='text column, vectorized into word counts')
    source.add_argument('--features', nargs='+', help='numeric feature columns')
    parser.add_argument('--model', choices=('multinomial', 'gaussian'), default=None,
                        help='defaults to multinomial for --text, gaussian for --features')
    parser.add_argument('--alpha', type=float, default=1.0, help='Laplace smoothing (multinomial)')
    parser.add_argument('--density', choices=('compat', 'normal'), default='compat',
                        help='feature log-density (gaussian)')
    parser.add_argument('--max-features', type=int, default=1000, help='vocabulary size for --text')
    parser.add_argument('--test-size', type=float, default=0.25)
    parser.add_argument('--random-state', type=int, default=42)
    parser.add_argument('--verbose', action='store_true')
    return parser


def load_dataset(path, label, columns, parser):
    df = pd.read_csv(path)
    missing = [col for col in [label] + columns if col not in df.columns]
    if missing:
        parser.error(f"columns not found in {path}: {', '.join(missing)}")
    return df.dropna(subset=[label])


def run(argv=None):
    """Parse argv, train, evaluate, and return the held-out accuracy."""
    parser = build_parser()
    args = parser.parse_args(argv)
    columns = [args.text] if args.text else args.features
    model_type = args.model or ('multinomial' if args.text else 'gaussian')

    df = load_dataset(args.data, args.label, columns, parser)
    y = df[args.label].to_numpy()
    if args.text:
        docs_train, docs_test, y_train, y_test = train_test_split(
            df[args.text].fillna(''), y, test_size=args.test_size, random_state=args.random_state)
        vectorizer = TextVectorizer(max_features=args.max_features)
        x_train = vectorizer.fit_transform(docs_train)
        x_test = vectorizer.transform(docs_test)
    else:
        x = df[columns].to_numpy(dtype=float)
        x_train, x_test, y_train, y_test = train_test_split(
            x, y, test_size=args.test_size, random_state=args.random_state)

    if model_type == 'multinomial':
        model = MultinomialNB(alpha=args.alpha, verbose=args.verbose)
    else:
        model = GaussianNB(density=args.density, verbose=args.verbose)
    model.fit(x_train, y_train)

    accuracy = model.score(x_test, y_test)
    y_pred = model.predict_batch(x_test)
    print(f"model={model_type} | train={len(y_train)} | test={len(y_test)} | accuracy={accuracy:.4f}")
    print(classification_report(y_test, y_pred, labels=np.unique(y), zero_division=0))
    return accuracy


def main(argv=None):
    run(argv)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
