# LibWizard - license header maintenance for source trees
# Copyright (C) 2024-2026 LibWizard Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from pathlib import PurePosixPath

from lib_wizard.enumerator import iter_files
from lib_wizard.excludes import ExcludeRuleSet


def test_blank_and_comment_entries_are_dropped():
    rules = ExcludeRuleSet.from_patterns(["", "   ", "# comment", "  # indented comment", "*.min.js"])
    assert rules.patterns == ("*.min.js",)
    assert len(rules) == 1


def test_star_does_not_cross_directories():
    rules = ExcludeRuleSet.from_patterns(["lib/*.js"])
    assert rules.is_excluded("lib/a.js")
    assert not rules.is_excluded("lib/sub/a.js")
    assert not rules.is_excluded("other/lib/a.js")


def test_globstar_matches_any_depth():
    rules = ExcludeRuleSet.from_patterns(["**/node_modules/**"])
    assert rules.is_excluded("node_modules")
    assert rules.is_excluded("node_modules/pkg/index.js")
    assert rules.is_excluded("src/node_modules")
    assert rules.is_excluded("src/vendor/node_modules/pkg/index.js")
    assert not rules.is_excluded("src/node_modules_backup/index.js")


def test_globstar_between_segments():
    rules = ExcludeRuleSet.from_patterns(["tests/**/fixtures"])
    assert rules.is_excluded("tests/fixtures")
    assert rules.is_excluded("tests/unit/deep/fixtures")
    assert not rules.is_excluded("src/fixtures")


def test_pattern_without_slash_matches_basename_anywhere():
    rules = ExcludeRuleSet.from_patterns(["*.min.js"])
    assert rules.is_excluded("app.min.js")
    assert rules.is_excluded("dist/js/app.min.js")
    assert not rules.is_excluded("dist/js/app.js")


def test_question_mark_and_character_class():
    rules = ExcludeRuleSet.from_patterns(["src/file?.[jt]s", "src/[!a]*.nut"])
    assert rules.is_excluded("src/file1.js")
    assert rules.is_excluded("src/fileA.ts")
    assert not rules.is_excluded("src/file10.js")
    assert rules.is_excluded("src/b.nut")
    assert not rules.is_excluded("src/a.nut")


def test_leading_dot_slash_is_ignored():
    rules = ExcludeRuleSet.from_patterns(["./build/**"])
    assert rules.is_excluded("./build/out.js")
    assert rules.is_excluded(PurePosixPath("build/out.js"))


def test_invalid_pattern_is_skipped_and_others_kept():
    rules = ExcludeRuleSet.from_patterns(["src/[z-a].js", "*.nut"])
    assert rules.patterns == ("*.nut",)
    assert rules.is_excluded("a.nut")


def test_brace_alternatives_expand_into_several_rules():
    rules = ExcludeRuleSet.from_patterns(["**/*.{min,bundle}.js"])
    assert rules.is_excluded("dist/app.min.js")
    assert rules.is_excluded("app.bundle.js")
    assert not rules.is_excluded("dist/app.js")


def test_nested_and_numeric_braces():
    rules = ExcludeRuleSet.from_patterns(["{lib,src/{gen,tmp}}/**", "fixture{1..3}.nut"])
    assert rules.is_excluded("lib/a.js")
    assert rules.is_excluded("src/gen/a.js")
    assert rules.is_excluded("src/tmp")
    assert not rules.is_excluded("src/app.js")
    assert rules.is_excluded("tests/fixture2.nut")
    assert not rules.is_excluded("tests/fixture4.nut")


def test_single_item_braces_stay_literal():
    rules = ExcludeRuleSet.from_patterns(["{a}.js"])
    assert rules.is_excluded("{a}.js")
    assert not rules.is_excluded("a.js")


def test_negated_pattern_excludes_everything_else():
    rules = ExcludeRuleSet.from_patterns(["!src/**"])
    assert rules.patterns == ("!src/**",)
    assert not rules.is_excluded("src")
    assert not rules.is_excluded("src/app.js")
    assert rules.is_excluded("lib/app.js")
    assert not ExcludeRuleSet.from_patterns(["!!src/**"]).is_excluded("lib/app.js")


def test_wildcards_skip_dotfiles_unless_spelled_out():
    rules = ExcludeRuleSet.from_patterns(["*.js", "cache/**"])
    assert rules.is_excluded("app.js")
    assert not rules.is_excluded(".eslintrc.js")
    assert not rules.is_excluded(".hidden/app.js")
    assert rules.is_excluded("cache")
    assert not rules.is_excluded("cache/.keep/x.js")

    dotted = ExcludeRuleSet.from_patterns([".*.js", "**/.git/**"])
    assert dotted.is_excluded(".eslintrc.js")
    assert dotted.is_excluded("sub/.git/config")


def test_empty_rule_set_excludes_nothing():
    assert not ExcludeRuleSet().is_excluded("anything.js")


def _make_tree(root):
    for relative in [
        "a.js",
        "lib/b.nut",
        "lib/c.txt",
        "node_modules/dep/index.js",
        "src/node_modules/dep/index.js",
        "src/app.min.js",
        "src/app.js",
    ]:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x\n", encoding="utf-8")


def test_iter_files_lists_everything_without_rules(tmp_path):
    _make_tree(tmp_path)
    found = sorted(p.relative_to(tmp_path).as_posix() for p in iter_files(tmp_path))
    assert len(found) == 7
    assert "node_modules/dep/index.js" in found


def test_iter_files_prunes_excluded_directories(tmp_path, monkeypatch):
    _make_tree(tmp_path)
    rules = ExcludeRuleSet.from_patterns(["**/node_modules/**", "*.min.js"])

    checked = []
    original = ExcludeRuleSet.is_excluded

    def spy(self, path):
        checked.append(str(path))
        return original(self, path)

    monkeypatch.setattr(ExcludeRuleSet, "is_excluded", spy)

    found = [p.relative_to(tmp_path).as_posix() for p in iter_files(tmp_path, rules)]
    assert sorted(found) == ["a.js", "lib/b.nut", "lib/c.txt", "src/app.js"]
    # nothing below a pruned directory is ever looked at
    assert not any(path.startswith("node_modules/") for path in checked)
    assert not any(path.startswith("src/node_modules/") for path in checked)


def test_iter_files_is_lazy(tmp_path):
    _make_tree(tmp_path)
    files = iter_files(tmp_path)
    first = next(files)
    assert first.is_file()
