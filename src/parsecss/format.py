#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""
formatting options and the text-level compaction used when minifying

canonical
	tab indented, one declaration per line, comments kept
minify
	skip comments
	skip whitespace where possible
	skip semi-colons where possible
	shorten #aabbcc colors to #abc
"""

import re

class Format:
	"""Options for CSS formatting"""
	def __init__(self, minify, indent_char, selector_sep, value_leading_space,
			last_semi, keep_comments):
		self.minify = minify
		self.indent_char = indent_char
		self.selector_sep = selector_sep
		self.value_leading_space = value_leading_space
		self.last_semi = last_semi
		self.keep_comments = keep_comments
	def __repr__(self):
		return 'Format(%s)' % ('minify' if self.minify else 'canonical',)
	def newline(self):
		return '' if self.minify else '\n'
	def indent(self, depth):
		return '' if self.minify else self.indent_char * depth
	@staticmethod
	def canonical():
		return Format(minify=False, indent_char='\t', selector_sep=', ',
			value_leading_space=True, last_semi=True, keep_comments=True)
	@staticmethod
	def minify():
		return Format(minify=True, indent_char='', selector_sep=',',
			value_leading_space=False, last_semi=False, keep_comments=False)

# strings and unquoted url(...) are copied through untouched, everything
# else is split into whitespace runs and runs of other characters
_TOKEN_RE = re.compile(r'''("(?:\\.|[^"\\])*"?|'(?:\\.|[^'\\])*'?)|([uU][rR][lL]\([^)"']*\))|(\s+)|((?:(?![uU][rR][lL]\([^)"']*\))[^"'\s])+)''', re.S)

# Ref: http://www.w3.org/TR/CSS2/syndata.html#color-units
_HEX6_RE = re.compile(r'#([0-9a-fA-F])\1([0-9a-fA-F])\2([0-9a-fA-F])\3(?![0-9a-zA-Z_-])')

class Color:
	@staticmethod
	def shortest(s):
		"""
		given text that may contain #aabbcc colors, replace each with #abc
		"""
		return _HEX6_RE.sub(lambda m: '#' + m.group(1) + m.group(2) + m.group(3), s)

def tokenize(text):
	"""split text into (kind, str) pairs, kind being 'str', 'url', 'space' or 'text'"""
	toks = []
	for quoted, url, space, other in _TOKEN_RE.findall(text):
		if quoted:
			toks.append(('str', quoted))
		elif url:
			toks.append(('url', url))
		elif space:
			toks.append(('space', ' '))
		else:
			toks.append(('text', other))
	return toks

def _squeeze(toks, no_space_after, no_space_before, depth_sensitive=None):
	"""
	join tokens, dropping a space when the text before it ends in one of
	no_space_after or the text after it starts with one of no_space_before.
	depth_sensitive characters only count outside parentheses.
	"""
	out = []
	depth = 0
	for i, (kind, s) in enumerate(toks):
		if kind == 'space':
			if not out or i + 1 == len(toks):
				continue
			prev = out[-1]
			nxt = toks[i+1][1]
			if prev[-1] in no_space_after or nxt[0] in no_space_before:
				continue
			if depth_sensitive and depth == 0 and \
					(prev[-1] in depth_sensitive or nxt[0] in depth_sensitive):
				continue
			out.append(' ')
			continue
		if kind == 'text':
			depth += s.count('(') - s.count(')')
		out.append(s)
	return ''.join(out).strip()

def compact_selector(sel):
	"""'ul  >  li:not( .a , .b )' => 'ul>li:not(.a,.b)'"""
	return _squeeze(tokenize(sel), '(,', '),', depth_sensitive='>+~')

def compact_params(params):
	"""'screen and (max-width: 434px)' => 'screen and (max-width:434px)'"""
	return _squeeze(tokenize(params), '(,:', '),:')

def compact_value(value):
	"""'rgba(0, 0, 0, .5)  !important' => 'rgba(0,0,0,.5)!important'"""
	toks = [(k, Color.shortest(s) if k == 'text' else s) for k, s in tokenize(value)]
	return _squeeze(toks, '(,/', '),/!')

def collapse_space(text):
	"""whitespace runs outside strings become a single space"""
	return ''.join(s for _, s in tokenize(text)).strip()
