#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""Parser error types."""


class CSSParseError(Exception):
	"""Raised when CSS source cannot be parsed."""

	def __init__(self, message, position=None, line=None, column=None):
		self.message = message
		self.position = position
		self.line = line
		self.column = column
		super().__init__(message)

	@staticmethod
	def at(text, position, message):
		"""build an error pointing at character offset `position` of `text`"""
		line = text.count('\n', 0, position) + 1
		column = position - (text.rfind('\n', 0, position) + 1) + 1
		return CSSParseError('%s (line %u, column %u)' % (message, line, column),
			position=position, line=line, column=column)
