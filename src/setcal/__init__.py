import argparse
import sys

import logging
from contexttimer import Timer
from logzero import logger
from setcal.evaluator import evaluate
from setcal.program import Program, load
from setcal.utils import SetcalError


__version__ = "0.1.0"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Evaluate a set and relation calculator program')
    parser.add_argument('--input_file', '-i', required=True, type=str, help='input file')
    parser.add_argument('--output_file', '-o', type=str, default=None,
                        help='output file, defaults to the standard output')
    parser.add_argument('--debug', '-d', action='store_true', help='debug mode')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    input_file = args.input_file
    logger.info(f'Input file: {input_file}')
    try:
        with open(input_file, 'r') as f:
            text = f.read()
        with Timer() as t:
            program: Program = evaluate(load(text))
    except SetcalError as e:
        logger.error(e.diagnostic(input_file))
        sys.exit(1)
    except OSError as e:
        logger.error(f'{input_file}: io: {e.strerror}')
        sys.exit(1)
    logger.info(f'Evaluated {len(program)} line(s) in {t.elapsed:.3f}s')
    lines = program.listing()
    if args.output_file is None:
        for line in lines:
            print(line)
    else:
        with open(args.output_file, 'w') as f:
            f.write('\n'.join(lines) + '\n')
        logger.info(f'Output file: {args.output_file}')
