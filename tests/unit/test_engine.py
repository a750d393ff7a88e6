"""
Unit tests for the reorganization engine.
"""

from unittest.mock import Mock, patch

import pytest
from prettyimports.core.engine import detect_newline, organize
from prettyimports.support.config import OrganizeImportsConfig
from prettyimports.support.exceptions import SourceParseError
from prettyimports.support.models import NoChange, Replace, TextSpan


EXAMPLE = """import { z } from "zod";
import { useState, createContext } from "react";
import React from "react";
import { Button } from "@/components/ui/button";
import { Card } from "@/components/ui/card";
import { Input } from "@/components/ui/input";

export function App() {}
"""

EXPECTED_IMPORTS = """import { createContext, useState } from "react";
import React from "react";
import { z } from "zod";

import { Button } from "@/components/ui/button";
import { Input } from "@/components/ui/input";
import { Card } from "@/components/ui/card";"""


def organize_twice(text: str, file_path: str = "a.ts", config=None):
    first = organize(text, file_path, config)
    updated = first.apply(text)
    return first, updated, organize(updated, file_path, config)


def test_groups_and_sorts_example():
    edit = organize(EXAMPLE, "App.tsx", OrganizeImportsConfig())

    last = 'import { Input } from "@/components/ui/input";'
    assert isinstance(edit, Replace)
    assert edit.span == TextSpan(0, EXAMPLE.index(last) + len(last))
    assert edit.new_text == EXPECTED_IMPORTS
    assert edit.apply(EXAMPLE).endswith("\n\nexport function App() {}\n")


def test_example_is_idempotent():
    _, updated, second = organize_twice(EXAMPLE, "App.tsx")
    assert isinstance(second, NoChange)
    assert updated.startswith(EXPECTED_IMPORTS)


def test_no_imports():
    assert organize("const x = 1;\n", "a.ts") == NoChange()
    assert organize("", "a.ts") == NoChange()


def test_alphabetical_sort():
    text = 'import b from "bbb";\nimport a from "aaa";\n'
    edit = organize(text, "a.ts", OrganizeImportsConfig(sort_method="alphabetical"))
    assert edit.new_text == 'import a from "aaa";\nimport b from "bbb";'


def test_named_bindings_sorted():
    edit = organize('import { b, a } from "x";\n', "a.ts")
    assert edit.new_text == 'import { a, b } from "x";'


def test_imports_after_code_are_untouched():
    text = 'import zz from "zz";\nimport a from "a";\nfoo();\nimport c from "c";\nimport b from "b";\n'
    edit = organize(text, "a.js", OrganizeImportsConfig(sort_method="alphabetical"))

    assert edit.span == TextSpan(0, text.index("\nfoo();"))
    assert edit.apply(text) == 'import a from "a";\nimport zz from "zz";\nfoo();\nimport c from "c";\nimport b from "b";\n'


def test_single_import_after_code_is_no_change():
    text = 'import b from "b";\nconst x = 1;\nimport a from "a";\n'
    assert organize(text, "a.ts", OrganizeImportsConfig(sort_method="alphabetical")) == NoChange()


def test_already_organized_is_no_change():
    text = 'import React from "react";\nimport z from "zod";\n\nimport a from "./a";\n\nrun();\n'
    assert organize(text, "a.ts") == NoChange()


def test_single_blank_line_between_groups():
    text = 'import a from "./a";\n\n\n\nimport react from "react";\n'
    edit = organize(text, "a.ts")
    assert edit.new_text == 'import react from "react";\n\nimport a from "./a";'
    assert edit.new_text.count("\n\n") == 1


def test_only_local_imports_have_no_blank_line():
    text = 'import b from "./bb";\n\nimport a from "./a";\n'
    edit = organize(text, "a.ts")
    assert edit.new_text == 'import b from "./bb";\nimport a from "./a";'


def test_tie_break_is_alphabetical_regardless_of_input():
    forward = organize('import v from "vue";\nimport z from "zod";\nimport a from "ava";\n', "a.ts")
    backward = organize('import a from "ava";\nimport z from "zod";\nimport v from "vue";\n', "a.ts")
    expected = 'import a from "ava";\nimport v from "vue";\nimport z from "zod";'
    assert forward.new_text == backward.new_text == expected


def test_missing_semicolons_are_added():
    text = 'import b from "./b"\nimport a from "a"\n'
    first, updated, second = organize_twice(text)
    assert first.new_text == 'import a from "a";\n\nimport b from "./b";'
    assert updated == 'import a from "a";\n\nimport b from "./b";\n'
    assert second == NoChange()


def test_leading_whitespace_is_replaced():
    text = '\n\nimport a from "a";\n'
    edit = organize(text, "a.ts")
    assert edit.span == TextSpan(0, len(text) - 1)
    assert edit.new_text == 'import a from "a";'


def test_comments_move_with_their_import():
    text = (
        "// Copyright\n"
        "\n"
        'import { b } from "./b";\n'
        "// react stuff\n"
        'import React from "react"; // default\n'
        'import z from "zod";\n'
        "\n"
        "run();\n"
    )
    first, updated, second = organize_twice(text)

    assert first.new_text == (
        "// Copyright\n"
        "\n"
        "// react stuff\n"
        'import React from "react"; // default\n'
        'import z from "zod";\n'
        "\n"
        'import { b } from "./b";'
    )
    assert updated.endswith("\n\nrun();\n")
    assert second == NoChange()


def test_crlf_line_endings():
    text = 'import b from "./b";\r\nimport a from "a";\r\n'
    edit = organize(text, "a.ts")
    assert edit.new_text == 'import a from "a";\r\n\r\nimport b from "./b";'
    assert organize(edit.apply(text), "a.ts") == NoChange()


def test_all_import_forms_round_trip():
    text = (
        'import "./polyfills";\n'
        "import type { Props } from './types';\n"
        'import * as path from "node:path";\n'
        'import React, { type FC, useState as useS } from "react";\n'
    )
    first, updated, second = organize_twice(text, "a.tsx")

    assert first.new_text == (
        'import * as path from "node:path";\n'
        'import React, { type FC, useState as useS } from "react";\n'
        "\n"
        'import "./polyfills";\n'
        "import type { Props } from './types';"
    )
    assert second == NoChange()


def test_custom_prefixes():
    config = OrganizeImportsConfig(local_prefixes=("app/",), treat_relative_as_local=False)
    text = 'import a from "./a";\nimport b from "app/b";\n'
    edit = organize(text, "a.ts", config)
    assert edit.new_text == 'import a from "./a";\n\nimport b from "app/b";'


def test_unknown_sort_method_falls_back_to_default():
    logger = Mock()
    text = 'import z from "zod";\nimport r from "react";\n'
    edit = organize(text, "a.ts", OrganizeImportsConfig(sort_method="random"), logger=logger)
    assert edit.new_text == 'import r from "react";\nimport z from "zod";'
    logger.warning.assert_called()


def test_parse_failure_returns_no_change():
    logger = Mock()
    assert organize("import a from 'a';\ud800", "a.ts", logger=logger) == NoChange()
    logger.warning.assert_called_once()


def test_unexpected_error_returns_no_change():
    logger = Mock()
    with patch("prettyimports.core.engine.parse_leading_imports", side_effect=RuntimeError("boom")):
        assert organize('import a from "a";', "a.ts", logger=logger) == NoChange()
    logger.error.assert_called_once()


def test_parse_error_from_parser_returns_no_change():
    with patch(
        "prettyimports.core.engine.parse_leading_imports",
        side_effect=SourceParseError("a.ts", "bad"),
    ):
        assert organize('import a from "a";', "a.ts") == NoChange()


def test_trace_lines_are_logged():
    logger = Mock()
    organize('import b from "./b";\nimport a from "a";\n', "a.ts", logger=logger)

    messages = [c.args[0] % c.args[1:] for c in logger.debug.call_args_list]
    assert "Found 2 imports to organize" in messages
    assert "Local import: ./b" in messages
    assert "Third-party import: a" in messages


@pytest.mark.parametrize("method", ["alphabetical", "length-asc", "length-desc", "length-then-alpha"])
def test_idempotent_for_every_method(method):
    config = OrganizeImportsConfig(sort_method=method)
    _, _, second = organize_twice(EXAMPLE, "App.tsx", config)
    assert second == NoChange()


def test_detect_newline():
    assert detect_newline("a\r\nb") == "\r\n"
    assert detect_newline("a\nb") == "\n"


def test_trailing_comment_on_last_import_moves_with_it():
    text = 'import zzz from "zzz";\nimport a from "a"; // about a\nrun();\n'
    config = OrganizeImportsConfig(sort_method="alphabetical")
    first, updated, second = organize_twice(text, config=config)

    assert first.new_text == 'import a from "a"; // about a\nimport zzz from "zzz";'
    assert updated == 'import a from "a"; // about a\nimport zzz from "zzz";\nrun();\n'
    assert second == NoChange()


def test_byte_order_mark_is_kept():
    text = '\ufeffimport b from "./b";\nimport a from "a";\n'
    first, updated, second = organize_twice(text)

    assert first.span.start == 1
    assert updated == '\ufeffimport a from "a";\n\nimport b from "./b";\n'
    assert second == NoChange()
