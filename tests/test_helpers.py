"""Tests for the node predicates, class name extraction and rule rendering."""

import pytest

from parsecss import helpers
from parsecss.cssdoc import Stylesheet


@pytest.fixture
def nodes():
	return {
		'rule': Stylesheet.parse('a {}').first,
		'media': Stylesheet.parse('@media screen {}').first,
		'keyframes': Stylesheet.parse('@keyframes fadeIn {}').first,
		'webkit_keyframes': Stylesheet.parse('@-webkit-keyframes fadeIn {}').first,
		'font_face': Stylesheet.parse('@font-face {}').first,
	}


class TestIsKeyFrameAtRule:
	def test_false_for_media(self, nodes):
		assert helpers.is_keyframe_at_rule(nodes['media']) is False

	def test_false_for_font_face(self, nodes):
		assert helpers.is_keyframe_at_rule(nodes['font_face']) is False

	def test_false_for_non_at_rules(self, nodes):
		assert helpers.is_keyframe_at_rule(nodes['rule']) is False

	def test_true_for_keyframes(self, nodes):
		assert helpers.is_keyframe_at_rule(nodes['keyframes']) is True

	def test_true_for_vendor_prefixed_keyframes(self, nodes):
		assert helpers.is_keyframe_at_rule(nodes['webkit_keyframes']) is True


class TestIsMediaAtRule:
	def test_true_for_media(self, nodes):
		assert helpers.is_media_at_rule(nodes['media']) is True

	def test_false_for_font_face(self, nodes):
		assert helpers.is_media_at_rule(nodes['font_face']) is False

	def test_false_for_non_at_rules(self, nodes):
		assert helpers.is_media_at_rule(nodes['rule']) is False

	def test_false_for_keyframes(self, nodes):
		assert helpers.is_media_at_rule(nodes['keyframes']) is False
		assert helpers.is_media_at_rule(nodes['webkit_keyframes']) is False


class TestIsFontFaceAtRule:
	def test_false_for_media(self, nodes):
		assert helpers.is_font_face_at_rule(nodes['media']) is False

	def test_true_for_font_face(self, nodes):
		assert helpers.is_font_face_at_rule(nodes['font_face']) is True

	def test_false_for_non_at_rules(self, nodes):
		assert helpers.is_font_face_at_rule(nodes['rule']) is False

	def test_false_for_keyframes(self, nodes):
		assert helpers.is_font_face_at_rule(nodes['keyframes']) is False
		assert helpers.is_font_face_at_rule(nodes['webkit_keyframes']) is False


class TestPredicatesAreTotal:
	@pytest.mark.parametrize('predicate', [
		helpers.is_font_face_at_rule,
		helpers.is_media_at_rule,
		helpers.is_keyframe_at_rule,
	])
	def test_false_for_other_shapes(self, predicate):
		doc = Stylesheet.parse('/* c */ a { color: red }')
		decl = doc.nodes[1].first
		for node in (None, doc, doc.nodes[0], decl, 'media'):
			assert predicate(node) is False

	def test_at_most_one_predicate_matches(self, nodes):
		predicates = (helpers.is_font_face_at_rule, helpers.is_media_at_rule, helpers.is_keyframe_at_rule)
		for node in nodes.values():
			assert sum(p(node) for p in predicates) <= 1

	def test_other_at_rules_match_nothing(self):
		node = Stylesheet.parse('@supports (display: grid) {}').first
		assert not helpers.is_font_face_at_rule(node)
		assert not helpers.is_media_at_rule(node)
		assert not helpers.is_keyframe_at_rule(node)


class TestSelectorToClassNames:
	def test_none(self):
		assert helpers.selector_to_class_names('') == []
		assert helpers.selector_to_class_names('a') == []
		assert helpers.selector_to_class_names('#link') == []
		assert helpers.selector_to_class_names('div:hover') == []

	def test_one_class(self):
		assert helpers.selector_to_class_names('.a') == ['a']
		assert helpers.selector_to_class_names('.b') == ['b']
		assert helpers.selector_to_class_names('.b-c') == ['b-c']
		assert helpers.selector_to_class_names('.b_c-d') == ['b_c-d']

	def test_multiple_classes(self):
		assert helpers.selector_to_class_names('.a.b.c') == ['a', 'b', 'c']
		assert helpers.selector_to_class_names('.a .b .c') == ['a', 'b', 'c']

	def test_repeats_dropped(self):
		assert helpers.selector_to_class_names('.a .b .a') == ['a', 'b']
		assert helpers.selector_to_class_names('.b.a > .a.b') == ['b', 'a']

	def test_case_sensitive(self):
		assert helpers.selector_to_class_names('.Nav .nav') == ['Nav', 'nav']

	def test_tags_and_classes(self):
		assert helpers.selector_to_class_names('a.link') == ['link']
		assert helpers.selector_to_class_names('footer .link') == ['link']

	def test_ids_and_classes(self):
		assert helpers.selector_to_class_names('#link.link') == ['link']
		assert helpers.selector_to_class_names('#link .link') == ['link']

	def test_attributes(self):
		assert helpers.selector_to_class_names('.link[target="_blank"]') == ['link']
		assert helpers.selector_to_class_names('a[target="_blank"]') == []

	def test_pseudo_selectors(self):
		assert helpers.selector_to_class_names('.link:hover') == ['link']
		assert helpers.selector_to_class_names('a:hover') == []

	def test_pseudo_selectors_with_additional_classes(self):
		assert helpers.selector_to_class_names('.link:hover .partial') == ['link', 'partial']
		assert helpers.selector_to_class_names('a:hover .partial') == ['partial']

	def test_not_selectors_are_not_special(self):
		assert helpers.selector_to_class_names('.link:not(.no)') == ['link', 'no']


class TestShouldSplitRule:
	def split(self, css):
		return helpers.should_split_rule(Stylesheet.parse(css).first)

	def test_single_selector(self):
		assert self.split('.a {}') is False

	def test_no_classes(self):
		assert self.split('a, b, #c {}') is False

	def test_same_classes(self):
		assert self.split('.link:before, .link a {}') is False

	def test_different_classes(self):
		assert self.split('.a, .b {}') is True

	def test_classes_and_no_classes(self):
		assert self.split('a, .b {}') is True

	def test_same_classes_different_order(self):
		assert self.split('.a.b, .b.a {}') is True


class TestRuleToString:
	def test_simple_standalone_rules(self):
		rule = Stylesheet.parse('a {color:red;}').first
		assert helpers.rule_to_string(rule) == 'a{color:red}'

		rule = Stylesheet.parse('.link {display: none;}').first
		assert helpers.rule_to_string(rule) == '.link{display:none}'

	def test_multiple_declarations(self):
		rule = Stylesheet.parse('.link {display: none; color: blue;}').first
		assert helpers.rule_to_string(rule) == '.link{display:none;color:blue}'

	def test_media_rules(self):
		css = ''.join([
			'@media screen and (max-width: 434px) {',
			'.NavHeader .mweb {',
			'padding-left: 5px;',
			'padding-right: 10px;',
			'}',
			'}',
		])
		minified_css = ''.join([
			'@media screen and (max-width:434px){',
			'.NavHeader .mweb{',
			'padding-left:5px;',
			'padding-right:10px',
			'}',
			'}',
		])
		parent_node = Stylesheet.parse(css).first
		rule = parent_node.nodes[0]
		assert helpers.rule_to_string(rule, parent_node) == minified_css

	def test_non_media_parent_is_not_wrapped(self):
		parent_node = Stylesheet.parse('@supports (display: grid) { .a { display: grid } }').first
		rule = parent_node.nodes[0]
		assert helpers.rule_to_string(rule, parent_node) == '.a{display:grid}'

	def test_does_not_modify_the_rule(self):
		parent_node = Stylesheet.parse('@media print { a, b { color: red } }').first
		rule = parent_node.nodes[0]
		before = str(rule)
		helpers.rule_to_string(rule.clone(selectors=['a']), parent_node)
		assert str(rule) == before
		assert rule.selectors == ['a', 'b']


class TestMinify:
	def test_minify(self):
		assert helpers.minify('a {\n\tcolor: red;\n}\n') == 'a{color:red}'

	def test_minify_is_stable(self):
		once = helpers.minify('@media screen { a > b { margin : 0  auto ; } }')
		assert helpers.minify(once) == once
