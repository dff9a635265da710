"""Command-line interface for the regression report."""

from typing import List, Optional, Tuple
import argparse
import logging
import sys

from .config import load_config
from .errors import RegressionError
from .estimator import Estimator
from .loader import load_sample
from .report import format_report, save_parameters, save_plot
from .sample import Sample

logger = logging.getLogger(__name__)

# Reference dataset: y = x² sampled at 1..8, held-out point (10, 100)
DEMO_TRAIN = ([1, 2, 3, 4, 5, 6, 7, 8], [1, 4, 9, 16, 25, 36, 49, 64])
DEMO_TEST = ([10], [100])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Simple linear regression: fit, R² and held-out RMSE'
    )

    # Data
    parser.add_argument('--train', nargs='+', metavar='PATH',
                        help='CSV files or directories to fit on (default: built-in demo data)')
    parser.add_argument('--test', nargs='+', metavar='PATH',
                        help='CSV files or directories to score predictions on (default: --train)')
    parser.add_argument('--x-column', help='Independent variable column')
    parser.add_argument('--y-column', help='Dependent variable column')

    # Output
    parser.add_argument('--config', help='YAML config file')
    parser.add_argument('--save-params', help='Save fitted parameters to a YAML file')
    parser.add_argument('--save-plot', help='Save a plot of the fit')
    parser.add_argument('--no-percent', action='store_true',
                        help='Print R² as a fraction instead of a percentage')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    return parser


def _load_samples(args, config) -> Tuple[Sample, Sample]:
    if not args.train:
        logger.info('No input files given, using demo data')
        return Sample(*DEMO_TRAIN), Sample(*DEMO_TEST)

    x_column = args.x_column or config['data']['x_column']
    y_column = args.y_column or config['data']['y_column']
    train = load_sample(args.train, x_column, y_column)
    test = load_sample(args.test, x_column, y_column) if args.test else train
    return train, test


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.test and not args.train:
        parser.error('--test requires --train')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f'Invalid config: {e}')
        return 1

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(config['logging']['level'])

    try:
        train, test = _load_samples(args, config)
        logger.info(f'Train samples: {len(train)}, test samples: {len(test)}')

        estimator = Estimator(train)
        fit_result = estimator.fit()
        logger.info(f'Fitted line: intercept={fit_result.intercept:.6f}, slope={fit_result.slope:.6f}')

        predictions = estimator.predict(fit_result, test)
        accuracy = estimator.rmse(predictions, test)
        score = estimator.score()
    except RegressionError as e:
        logger.error(f'Regression failed: {e}')
        return 1
    except (FileNotFoundError, KeyError, ValueError) as e:
        logger.error(f'Could not load data: {e}')
        return 1

    percent = config['report']['percent_score'] and not args.no_percent
    for line in format_report(fit_result, accuracy, score, percent=percent,
                              float_format=config['report']['float_format']):
        print(line)

    params_file = args.save_params or config['output']['params_file']
    if params_file:
        save_parameters(params_file, fit_result,
                        metrics={'rmse': accuracy, 'r_squared': score},
                        samples=len(train))

    plot_file = args.save_plot or config['output']['plot_file']
    if plot_file:
        save_plot(plot_file, train, fit_result, test_sample=test,
                  title=f'Least-squares fit (R²={score:.4f}, RMSE={accuracy:.3f})')

    return 0


if __name__ == '__main__':
    sys.exit(main())
