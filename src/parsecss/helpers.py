#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""
parsecss helpers: node predicates, class name extraction and rule rendering
"""

import re

from .cssdoc import AtRule, Stylesheet
from .format import Format

CLASS_NAME_RE = re.compile(r'\.([a-zA-Z0-9_-]+)')

def uniq(l):
	"""drop repeats, first occurrence wins"""
	out = []
	for x in l:
		if x not in out:
			out.append(x)
	return out

def is_keyframe_at_rule(node):
	"""@keyframes, including vendor prefixed ones like @-webkit-keyframes"""
	return isinstance(node, AtRule) and 'keyframes' in node.name

def is_media_at_rule(node):
	return isinstance(node, AtRule) and node.name == 'media'

def is_font_face_at_rule(node):
	return isinstance(node, AtRule) and node.name == 'font-face'

def selector_to_class_names(selector):
	"""
	given a selector string, return the class names in it, in order,
	without repeats. the selector is treated as plain text, so classes
	inside :not(...) or attribute values are picked up too.
	"""
	return uniq(CLASS_NAME_RE.findall(selector))

def should_split_rule(rule):
	"""
	a,b {} needs splitting into a {} and b {} unless every selector
	points at the same class list, or none of them reference a class
	"""
	if not selector_to_class_names(rule.selector):
		return False
	class_lists = [selector_to_class_names(s) for s in rule.selectors]
	return any(cl != class_lists[0] for cl in class_lists)

def minify(text):
	"""shortest equivalent representation of a css fragment"""
	return Stylesheet.parse(text).format(Format.minify())

def rule_to_string(rule, parent_node=None):
	"""
	minified text for `rule`. if `parent_node` is a @media node the rule is
	wrapped in it, so the fragment keeps its media query.
	"""
	rule_string = str(rule)
	if parent_node is not None and is_media_at_rule(parent_node):
		rule_string = ''.join([
			'@', parent_node.name, ' ',	# @media
			parent_node.params,		# screen and (max-width ...)
			' {', rule_string, '}',		# { .. }
		])
	return minify(rule_string)
