#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""
thin wrapper around simpleparse result tuples
"""

# tags whose text is never part of the rendered output
NOISE = ('s', 'space', 'comment')

class AstNode:
	def __init__(self, s, tag, start, end, child):
		self.tag = tag
		self.start = start
		self.end = end
		self.str = s[start:end]
		self.child = child
	def __str__(self):
		if self.child:
			return '%s(%s)' % (self.tag, str(self.child))
		else:
			return repr(self.str)
	def __repr__(self): return str(self)
	def dump(self, indent=0):
		ins = ' ' * indent
		if self.child:
			return ins + '%s:\n' % (self.tag,) + \
				''.join([c.dump(indent+1) for c in self.child])
		else:
			return ins + '%s %r\n' % (self.tag, self.str)
	def find(self, tag):
		"""first direct child tagged `tag`, or None"""
		for c in self.child:
			if c.tag == tag:
				return c
		return None
	def text(self):
		"""source text of this node with comments cut out"""
		if not self.child:
			return self.str
		parts, pos = [], self.start
		for c in self.child:
			if c.tag == 'comment':
				parts.append(self.str[pos - self.start:c.start - self.start])
				pos = c.end
		parts.append(self.str[pos - self.start:])
		return ''.join(parts)
	@staticmethod
	def make(matches, s):
		nodes = []
		for tag, start, end, child in matches:
			n = AstNode(s, tag, start, end,
				AstNode.make(child, s) if child else [])
			nodes.append(n)
		return nodes

def filter_space(l):
	"""strip whitespace and comments"""
	return [c for c in l if c.tag not in NOISE]
