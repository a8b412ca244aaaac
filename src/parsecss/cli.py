#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""
parsecss: split a stylesheet into font-face, keyframes, global and
per-class css and print the result as JSON
"""

import json
import logging
import sys
from optparse import OptionParser

from .cssdoc import Stylesheet
from .errors import CSSParseError
from .parse import parse_css

logger = logging.getLogger(__name__)

def option_parser():
	op = OptionParser(prog='parsecss', usage='%prog <options>')
	op.add_option('-f', '--file', dest='filename', metavar='FILE', help='read css from FILE instead of stdin')
	op.add_option('--pretty',     dest='pretty',     action='store_true', help='indent the JSON output')
	op.add_option('--parse-tree', dest='parse_tree', action='store_true', help='show the internal parse tree')
	op.add_option('-v', '--verbose', dest='verbose', action='store_true', help='log progress to stderr')
	return op

def main(argv=None):
	op = option_parser()
	opts, args = op.parse_args(argv)
	if args:
		op.error('Use the -f flag to specifiy an input file!')

	logging.basicConfig(stream=sys.stderr,
		level=logging.DEBUG if opts.verbose else logging.WARNING,
		format='%(name)s: %(levelname)s: %(message)s')

	if opts.filename:
		try:
			with open(opts.filename, 'r', encoding='utf-8') as f:
				contents = f.read()
		except OSError as e:
			print('parsecss: %s' % (e,), file=sys.stderr)
			return 1
	else:
		contents = sys.stdin.read()
	logger.debug('read %u chars from %s', len(contents), opts.filename or '<stdin>')

	try:
		if opts.parse_tree:
			print(Stylesheet.parse(contents).parse_tree(), end='')
			return 0
		result = parse_css(contents)
	except CSSParseError as e:
		print('parsecss: %s' % (e,), file=sys.stderr)
		return 1

	print(json.dumps(result, indent=2 if opts.pretty else None))
	return 0

if __name__ == '__main__':
	sys.exit(main())
