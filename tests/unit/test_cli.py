"""
Unit tests for appsui/cli/

Coverage plan
─────────────
arg parsing     → 5 tests  (global flags, roll defaults, nested actions,
                            invalid choices)
commands        → 8 tests  (roll, card add, prospect add / toggle,
                            expense add, book add, favourites, list empty)
main()          → 4 tests  (no subcommand, list, remove, bad index)
─────────────────────────────────────────────────────────────────
Total           = 17 tests
"""

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    """Call the CLI argument parser and return the parsed namespace."""
    from appsui.cli.main import build_parser
    parser = build_parser()
    return parser.parse_args(args)


@pytest.fixture
def config(tmp_path):
    from appsui.config import AppConfig
    return AppConfig(documents_dir=str(tmp_path / "Documents"))


# ─────────────────────────────────────────────────────────────────────────────
# 1. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_global_flags(self):
        ns = _parse(["--documents", "/tmp/docs", "--debug", "list", "cards"])
        assert ns.documents == "/tmp/docs"
        assert ns.debug is True
        assert ns.screen == "cards"

    def test_roll_defaults(self):
        ns = _parse(["roll"])
        assert ns.subcommand == "roll"
        assert ns.sides == 6
        assert ns.count == 1
        assert ns.seed is None

    def test_prospect_toggle_parses_id(self):
        ns = _parse(["prospect", "toggle", "--id", "ABC"])
        assert ns.action == "toggle"
        assert ns.prospect_id == "ABC"

    def test_unsupported_sides_rejected(self):
        with pytest.raises(SystemExit):
            _parse(["roll", "--sides", "7"])

    def test_unknown_screen_rejected(self):
        with pytest.raises(SystemExit):
            _parse(["list", "planets"])


# ─────────────────────────────────────────────────────────────────────────────
# 2. Command functions
# ─────────────────────────────────────────────────────────────────────────────

class TestCommands:

    def test_list_empty_outputs_zero(self, config, capsys):
        from appsui.cli.main import cmd_list
        assert cmd_list(config, "cards") == 0
        assert "0 cards" in capsys.readouterr().out

    def test_roll_is_saved(self, config, capsys):
        from appsui.cli.main import cmd_list, cmd_roll
        results = cmd_roll(config, sides=20, count=3, seed=42)
        assert len(results) == 3
        assert "Rolled" in capsys.readouterr().out
        assert cmd_list(config, "dice") == 1

    def test_card_add_rejects_blank(self, config, capsys):
        from appsui.cli.main import cmd_card_add
        assert cmd_card_add(config, "  ", "x") is False
        assert "non-empty" in capsys.readouterr().err

    def test_prospect_add_and_toggle(self, config, capsys):
        from appsui.cli.main import cmd_prospect_add, cmd_prospect_toggle
        prospect = cmd_prospect_add(config, "Paul", "paul@example.com")
        assert cmd_prospect_toggle(config, prospect.id) is True
        assert "now contacted" in capsys.readouterr().out
        assert cmd_prospect_toggle(config, "missing") is False

    def test_expense_add_lists_in_section(self, config, capsys):
        from appsui.cli.main import cmd_expense_add, cmd_list
        cmd_expense_add(config, "Laptop", "Business", 1500)
        capsys.readouterr()
        assert cmd_list(config, "expenses") == 1
        out = capsys.readouterr().out
        assert "business" in out
        assert "high" in out

    def test_book_add(self, config):
        from appsui.cli.main import cmd_book_add, cmd_list
        book = cmd_book_add(config, "Dune", "Herbert", "Fantasy", 5, "Spice")
        assert book is not None
        assert cmd_list(config, "books") == 1

    def test_book_add_requires_review(self, config):
        from appsui.cli.main import cmd_book_add
        assert cmd_book_add(config, "Dune", "Herbert", "Fantasy", 5, "") is None

    def test_favourites(self, config, capsys):
        from appsui.cli.main import cmd_favorite
        cmd_favorite(config, "add", "whistler")
        assert "whistler" in capsys.readouterr().out
        cmd_favorite(config, "remove", "whistler")
        assert "(none)" in capsys.readouterr().out


# ─────────────────────────────────────────────────────────────────────────────
# 3. main()
# ─────────────────────────────────────────────────────────────────────────────

class TestMain:

    def test_no_subcommand_prints_help(self, capsys):
        from appsui.cli.main import main
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_card_add_then_list(self, tmp_path, capsys):
        from appsui.cli.main import main
        docs = str(tmp_path / "docs")
        assert main(["--documents", docs, "card", "add", "--prompt", "2 + 2", "--answer", "4"]) == 0
        assert main(["--documents", docs, "list", "cards"]) == 0
        assert "2 + 2" in capsys.readouterr().out

    def test_remove_by_index(self, tmp_path, capsys):
        from appsui.cli.main import main
        docs = str(tmp_path / "docs")
        main(["--documents", docs, "prospect", "add", "--name", "A"])
        assert main(["--documents", docs, "remove", "prospects", "--index", "0"]) == 0
        capsys.readouterr()
        main(["--documents", docs, "list", "prospects"])
        assert "0 prospects" in capsys.readouterr().out

    def test_remove_bad_index_returns_error(self, tmp_path, capsys):
        from appsui.cli.main import main
        assert main(["--documents", str(tmp_path), "remove", "books", "--index", "3"]) == 1
        assert "Error" in capsys.readouterr().err
