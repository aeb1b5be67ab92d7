"""Tests for the rich console renderers."""

from __future__ import annotations

import pytest

from conftest import make_candidate
from recruitdesk.controller import CandidateViewController
from recruitdesk.models import Acknowledgment
from recruitdesk.reporting import console
from recruitdesk.reporting.console import print_acknowledgment, print_candidate_profile


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr(console._console, "width", 200)


def test_acknowledgment_escapes_candidate_name(capsys):
    record = make_candidate("c1", name="Ann [/b]", is_revealed=True)
    ack = CandidateViewController([record]).contact("c1", "email")
    print_acknowledgment(ack)
    assert "Contacting Ann [/b] via email" in capsys.readouterr().out


def test_acknowledgment_without_known_level(capsys):
    print_acknowledgment(Acknowledgment("[bold]plain[/bold]", "unknown"))
    assert "[bold]plain[/bold]" in capsys.readouterr().out


def test_unrevealed_profile_hides_identity_and_contact(capsys):
    record = make_candidate("c5", name="Hidden Person", email="hidden@example.com",
                            phone="+1 (555) 000-0000", skills=("SQL",), notes="Strong [portfolio]")
    print_candidate_profile(record)
    out = capsys.readouterr().out
    assert "Candidate #c5" in out
    assert "Hidden until revealed" in out
    assert "Strong [portfolio]" in out
    assert "Hidden Person" not in out
    assert "hidden@example.com" not in out
    assert "555" not in out


def test_revealed_profile_shows_contact_details(capsys):
    record = make_candidate("c3", name="Jordan Ellis", email="jordan@example.com",
                            phone="+1 (555) 123-4567", is_revealed=True, location="Tempe, AZ")
    print_candidate_profile(record)
    out = capsys.readouterr().out
    assert "Jordan Ellis" in out
    assert "jordan@example.com" in out
    assert "+1 (555) 123-4567" in out
    assert "Tempe, AZ" in out
