#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""
CSS parser

builds a tree of Stylesheet, AtRule, Rule, Decl and Comment nodes.
selectors, at-rule preludes and declaration values are kept as text;
only their whitespace is normalized when formatting.
"""

from simpleparse.parser import Parser

from .astnode import AstNode, filter_space
from .errors import CSSParseError
from .format import Format, collapse_space, compact_params, compact_selector, compact_value

# NOTE: a block tries rule before decl, so "from{...}" inside @keyframes and
# nested rules inside @media come out as rules
CSS_EBNF = r'''
css      := (s/';'/atrule/rule)*
atrule   := '@', atname, prelude?, (block/';')
atname   := [a-zA-Z_-], [a-zA-Z0-9_-]*
prelude  := (comment/string/parens/-[{};()"'])+
block    := '{', (s/';'/atrule/rule/decl)*, '}'
rule     := sels?, block
sels     := sel, (',', sel)*
sel      := (comment/string/brackets/parens/-[]{};,()"'[])+
decl     := property, s?, ':', value?
property := [a-zA-Z0-9_*-]+
value    := (comment/string/parens/-[;{}()"'])+
parens   := '(', (comment/string/parens/-[()"'])*, ')'
brackets := '[', (string/-[]"'])*, ']'
string   := dqstring/sqstring
dqstring := '"', (escape/-[\\"])*, '"'
sqstring := "'", (escape/-[\\'])*, "'"
escape   := '\\', -'\n'
s        := (space/comment)+
space    := [ \t\r\n\f]+
comment  := '/*', commtext, '*/'
commtext := -"*/"*
'''

class Node:
	parent = None
	def __str__(self):
		return self.format(Format.canonical())

class Container(Node):
	"""a node with a {...} body"""
	nodes = None
	def walk(self):
		"""every descendant, depth first, in document order"""
		for n in self.nodes or []:
			yield n
			if isinstance(n, Container):
				yield from n.walk()
	def walk_at_rules(self):
		return (n for n in self.walk() if isinstance(n, AtRule))
	def walk_rules(self):
		return (n for n in self.walk() if isinstance(n, Rule))
	@property
	def first(self):
		return self.nodes[0] if self.nodes else None

def format_block(nodes, fmt, depth):
	items = [n for n in nodes if fmt.keep_comments or not isinstance(n, Comment)]
	if not items:
		return '{}'
	nl = fmt.newline()
	lines = []
	for i, n in enumerate(items):
		s = fmt.indent(depth + 1) + n.format(fmt, depth + 1)
		# the last declaration in a block doesn't need a semi-colon
		if isinstance(n, Decl) and (fmt.last_semi or i + 1 < len(items)):
			s += ';'
		lines.append(s)
	return '{' + nl + nl.join(lines) + nl + fmt.indent(depth) + '}'

def nodes_from_ast(asts, parent):
	nodes = []
	for a in asts:
		if a.tag == 'atrule':
			nodes.append(AtRule.from_ast(a, parent))
		elif a.tag == 'rule':
			nodes.append(Rule.from_ast(a, parent))
		elif a.tag == 'decl':
			nodes.append(Decl.from_ast(a, parent))
		elif a.tag == 's':
			nodes.extend(Comment.from_ast(c, parent) for c in a.child if c.tag == 'comment')
	return nodes

class Stylesheet(Container):
	Parser = Parser(CSS_EBNF)
	def __init__(self, nodes, ast=None):
		self.nodes = nodes
		self.ast = ast
	def __repr__(self): return 'Stylesheet(%s)' % (','.join(map(repr, self.nodes)),)
	def format(self, fmt, depth=0):
		if not fmt.keep_comments:
			return ''.join(n.format(fmt) for n in self.nodes if not isinstance(n, Comment))
		return '\n'.join(n.format(fmt) for n in self.nodes)
	def parse_tree(self):
		return ''.join(a.dump() for a in self.ast or [])
	@staticmethod
	def parse(text):
		prod = 'css'
		ok, child, nextchar = Stylesheet.Parser.parse(text, production=prod)
		if not ok or nextchar != len(text):
			raise CSSParseError.at(text, nextchar,
				"Wasn't able to parse %s... as %s (%s chars parsed of %s)" % (
					repr(text[nextchar:nextchar+40]), prod, nextchar, len(text)))
		ast = AstNode.make(child or [], text)
		doc = Stylesheet([], ast)
		doc.nodes = nodes_from_ast(ast, doc)
		return doc

class AtRule(Container):
	def __init__(self, name, params='', nodes=None, parent=None):
		self.name = name
		self.params = params
		self.nodes = nodes
		self.parent = parent
	def __repr__(self):
		return 'AtRule(@%s %s,%s)' % (self.name, self.params, self.nodes)
	def format(self, fmt, depth=0):
		s = '@' + self.name
		if self.params:
			s += ' ' + (compact_params(self.params) if fmt.minify else collapse_space(self.params))
		if self.nodes is None:
			return s + ';'
		if not fmt.minify:
			s += ' '
		return s + format_block(self.nodes, fmt, depth)
	@staticmethod
	def from_ast(ast, parent):
		prelude = ast.find('prelude')
		block = ast.find('block')
		a = AtRule(ast.find('atname').str,
			prelude.text().strip() if prelude else '', None, parent)
		if block:
			a.nodes = nodes_from_ast(block.child, a)
		return a

class Rule(Container):
	def __init__(self, selectors, nodes, parent=None):
		self.selectors = selectors
		self.nodes = nodes
		self.parent = parent
	def __repr__(self):
		return 'Rule(%s,%s)' % (self.selectors, self.nodes)
	@property
	def selector(self):
		return ','.join(self.selectors)
	def clone(self, selectors=None):
		"""shallow copy, optionally with different selectors"""
		return Rule(list(self.selectors if selectors is None else selectors),
			list(self.nodes), self.parent)
	def format(self, fmt, depth=0):
		fix = compact_selector if fmt.minify else collapse_space
		selstr = fmt.selector_sep.join(fix(s) for s in self.selectors)
		if selstr and not fmt.minify:
			selstr += ' '
		return selstr + format_block(self.nodes, fmt, depth)
	@staticmethod
	def from_ast(ast, parent):
		sels = ast.find('sels')
		# "{...}" with no selector is a rule with an empty one
		selectors = [s.text().strip() for s in filter_space(sels.child)] if sels else ['']
		r = Rule(selectors, [], parent)
		r.nodes = nodes_from_ast(ast.find('block').child, r)
		return r

class Decl(Node):
	def __init__(self, property_, value, parent=None):
		self.property = property_
		self.value = value
		self.parent = parent
	def __repr__(self):
		return 'Decl(%s:%s)' % (self.property, self.value)
	def format(self, fmt, depth=0):
		valstr = compact_value(self.value) if fmt.minify else collapse_space(self.value)
		return self.property + ':' + \
			(' ' if fmt.value_leading_space and valstr else '') + valstr
	@staticmethod
	def from_ast(ast, parent):
		value = ast.find('value')
		return Decl(ast.find('property').str,
			value.text().strip() if value else '', parent)

class Comment(Node):
	def __init__(self, text, parent=None):
		self.text = text
		self.parent = parent
	def __repr__(self):
		return 'Comment(%s)' % (self.text,)
	def format(self, fmt, depth=0):
		return '/*' + self.text + '*/' if fmt.keep_comments else ''
	@staticmethod
	def from_ast(ast, parent):
		c = ast.find('commtext')
		return Comment(c.str if c else '', parent)
