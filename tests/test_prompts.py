"""Tests for the terminal and scripted prompters."""

from unittest import mock

import pytest
from sqlwhitelist.prompts import ClickPrompter, ScriptedPrompter

CHOICES = ["office", "home", "vpn-home", "NEW VALUE"]


class TestClickPrompter:
    def _select(self, *answers):
        with mock.patch("click.prompt", side_effect=list(answers)):
            return ClickPrompter().select("Which IP do you want to update?", CHOICES)

    def test_pick_by_number(self):
        assert self._select("2") == "home"

    def test_pick_by_exact_name(self):
        assert self._select("NEW VALUE") == "NEW VALUE"

    def test_unique_search_match(self):
        assert self._select("offi") == "office"

    def test_search_narrows_then_number(self):
        # "hom" matches home and vpn-home, so 2 picks from the narrowed list
        assert self._select("hom", "2") == "vpn-home"

    def test_no_match_resets_list(self, capsys):
        assert self._select("zzz", "1") == "office"
        assert "Nothing matches" in capsys.readouterr().out

    def test_text_is_stripped(self):
        with mock.patch("click.prompt", return_value="  home "):
            assert ClickPrompter().text("Enter new name") == "home"


class TestScriptedPrompter:
    def test_answers_in_order(self):
        prompter = ScriptedPrompter([True, "p"])
        assert prompter.confirm("ok?") is True
        assert prompter.text("project") == "p"
        assert prompter.asked == [("confirm", "ok?"), ("text", "project")]

    def test_select_rejects_unknown_choice(self):
        with pytest.raises(ValueError):
            ScriptedPrompter(["nope"]).select("pick", CHOICES)

    def test_runs_out_of_answers(self):
        with pytest.raises(RuntimeError):
            ScriptedPrompter([]).text("project")
