#!/usr/bin/env python
# -*- coding:utf-8 -*-

"""
Parses CSS stylesheets into the pieces needed for critical css delivery.
"""

import logging

from . import helpers
from .cssdoc import Stylesheet

logger = logging.getLogger(__name__)

def parse_css(contents):
	"""
	Given a CSS stylesheet, returns a dict with the following key-values:
	- fontfaceCss: a list of @font-face rules
	- keyframesCss: a list of (identifier, css) tuples for @keyframes rules
	- globalCss: a list of css strings that don't apply to any classes
	- classListCssPairs: a list of (class_names, css) tuples for css that
	  applies to classes, class_names being the classes in the rule's selector
	Empty lists are left out. Raises CSSParseError on malformed input.
	"""
	root = Stylesheet.parse(contents)

	global_css = []
	fontface_css = []
	keyframes_css = []
	class_list_css_pairs = []

	# only 2 types of @rules are special cased: font-face and keyframes
	for at_rule in root.walk_at_rules():
		# @font-face rules get their own section since they are almost
		# always critical and the fonts should be fetched asap
		if helpers.is_font_face_at_rule(at_rule):
			fontface_css.append(helpers.rule_to_string(at_rule))
		# @keyframes fadeIn {...} => ('fadeIn', '@keyframes fadeIn{...}')
		elif helpers.is_keyframe_at_rule(at_rule):
			keyframes_css.append((at_rule.params, helpers.rule_to_string(at_rule)))
		elif not helpers.is_media_at_rule(at_rule):
			logger.debug('dropping @%s %s', at_rule.name, at_rule.params)

	for rule in root.walk_rules():
		# rules inside @media count as regular rules, each wrapped in its
		# own copy of the @media. anything under another at-rule (keyframe
		# steps, @supports) is left out.
		if rule.parent is not root and not helpers.is_media_at_rule(rule.parent):
			logger.debug('skipping %r nested in %r', rule.selector, rule.parent)
			continue

		# a,b {} => a {} and b {}
		if helpers.should_split_rule(rule):
			units = [rule.clone(selectors=[s]) for s in rule.selectors]
		else:
			units = [rule]

		for unit in units:
			class_names = helpers.selector_to_class_names(unit.selector)
			css_string = helpers.rule_to_string(unit, rule.parent)
			if class_names:
				class_list_css_pairs.append((class_names, css_string))
			else:
				global_css.append(css_string)

	logger.debug('%u global, %u font-face, %u keyframes, %u class list',
		len(global_css), len(fontface_css), len(keyframes_css), len(class_list_css_pairs))

	retval = {}
	if global_css:
		retval['globalCss'] = global_css
	if fontface_css:
		retval['fontfaceCss'] = fontface_css
	if keyframes_css:
		retval['keyframesCss'] = keyframes_css
	if class_list_css_pairs:
		retval['classListCssPairs'] = class_list_css_pairs
	return retval
