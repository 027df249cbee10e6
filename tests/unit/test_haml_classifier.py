"""Unit tests for the HAML line classifier."""

import pytest

from i18n_extractor.core.exceptions import InvalidSyntax
from i18n_extractor.interfaces.classifier import LineRole


# =============================================================================
# Classification Tests
# =============================================================================


class TestClassify:
    """Test suite for HamlLineClassifier.classify."""

    @pytest.mark.parametrize(
        "content, role",
        [
            ("Hello", LineRole.PLAIN),
            ("", LineRole.PLAIN),
            ("= user.name", LineRole.SCRIPT),
            ("!= raw_html", LineRole.SCRIPT),
            ("~ preserved", LineRole.SCRIPT),
            ("- x = 1", LineRole.SILENT_SCRIPT),
            ("-# note", LineRole.HAML_COMMENT),
            ("%p Hi", LineRole.TAG),
            (".box", LineRole.TAG),
            ("#main", LineRole.TAG),
            ("/ html comment", LineRole.COMMENT),
            ("!!! 5", LineRole.DOCTYPE),
            (":markdown", LineRole.FILTER),
        ],
    )
    def test_roles(self, classifier, content, role):
        assert classifier.classify_content(content).role is role

    def test_tag_details(self, classifier):
        value = classifier.classify_content("%a.btn{href: '#'} Go").value
        assert value["name"] == "a"
        assert value["value"] == "Go"
        assert value["parse"] is False
        assert value["self_closing"] is False

    def test_class_shortcut_defaults_to_div(self, classifier):
        assert classifier.classify_content(".box").value["name"] == "div"

    def test_parsed_tag(self, classifier):
        value = classifier.classify_content("%span= @count").value
        assert value["parse"] is True
        assert value["value"] == "@count"

    def test_self_closing_tag(self, classifier):
        assert classifier.classify_content("%br/").value["self_closing"] is True

    def test_every_line_is_classified(self, classifier):
        text = "%div\n  %p Hi\n\n  = x\n"
        assert sorted(classifier.classify(text)) == [1, 2, 3, 4]

    def test_filter_body_is_nested(self, classifier):
        text = ":javascript\n  var a = 'Hi';\n\n  go();\n%p Done\n"
        metadata = classifier.classify(text)

        for line_no in (2, 3, 4):
            assert metadata[line_no].role is LineRole.FILTER
            assert metadata[line_no].value["nested"] is True
        assert metadata[5].role is LineRole.TAG

    def test_comment_block_is_nested(self, classifier):
        text = "%div\n  -#\n    %p Hidden\n  %p Shown\n"
        metadata = classifier.classify(text)

        assert metadata[3].role is LineRole.HAML_COMMENT
        assert metadata[4].role is LineRole.TAG

    def test_supports_file(self, classifier):
        assert classifier.supports_file("app/views/users/show.html.haml")
        assert not classifier.supports_file("app/views/users/show.html.erb")


# =============================================================================
# Validation Tests
# =============================================================================


class TestValidate:
    """Test suite for HamlLineClassifier.validate."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "%div\n  %p Hi\n  %p\n    Nested text\n",
            "%div\n\t%p Tabbed\n",
            "%div= form_for @user do |f|\n  = f.submit 'Save'\n",
            "- if admin?\n  %p Admin\n- else\n  %p Guest\n",
            ":javascript\n  if (a) {\n      b();\n  }\n",
            "%div\n  %p\n    %span Deep\n%footer Done\n",
        ],
    )
    def test_valid(self, classifier, text):
        classifier.validate(text, "ok.haml")

    @pytest.mark.parametrize(
        "text, line_no, reason",
        [
            ("  %p Hi\n", 1, "indenting at the beginning"),
            ("%div\n \t%p\n", 2, "both tabs and spaces"),
            ("%div\n  %p\n   %p\n", 3, "inconsistent indentation"),
            ("%div\n  %div\n      %p\n", 3, "levels deeper"),
            ("Hello\n  %p\n", 2, "plain text"),
            ("!!!\n  %p\n", 2, "header command"),
            ("%br/\n  %p\n", 2, "self-closing"),
            ("%p Hi\n  %span\n", 2, "same line"),
            ("%p{class: 'x' Hi\n", 1, "unbalanced"),
        ],
    )
    def test_invalid(self, classifier, text, line_no, reason):
        with pytest.raises(InvalidSyntax) as excinfo:
            classifier.validate(text, "bad.haml")
        assert excinfo.value.line_no == line_no
        assert reason in excinfo.value.reason
        assert "bad.haml" in str(excinfo.value)
