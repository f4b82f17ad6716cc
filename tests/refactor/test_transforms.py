"""Tests for the individual text transformations."""

from __future__ import annotations

from reactrefactor.refactor.transforms import (
    add_memo,
    convert_to_arrow_function,
    group_imports,
    module_path,
    sort_imports,
)


def test_arrow_conversion_preserves_arguments() -> None:
    content = "function Foo(props) { return <div>{x}</div>; }"

    converted = convert_to_arrow_function(content, "Foo")

    assert converted.startswith("const Foo = (props) => {")
    assert converted.endswith("return <div>{x}</div>; }")


def test_arrow_conversion_only_touches_the_component() -> None:
    content = "function helper(a) {\n}\nfunction Foo({ a, b }) {\n}\n"

    converted = convert_to_arrow_function(content, "Foo")

    assert converted == "function helper(a) {\n}\nconst Foo = ({ a, b }) => {\n}\n"


def test_arrow_conversion_skips_unknown_component() -> None:
    content = "function Unknown() {\n}\n"

    assert convert_to_arrow_function(content, "Unknown") == content


def test_add_memo_wraps_default_export_and_imports_memo() -> None:
    content = "const Foo = () => null;\nexport default Foo;\n"

    assert add_memo(content, "Foo") == (
        "import { memo } from 'react';\n"
        "const Foo = () => null;\n"
        "export default memo(Foo);\n"
    )


def test_add_memo_without_matching_export_is_noop() -> None:
    assert add_memo("export default FooBar;\n", "Foo") == "export default FooBar;\n"
    assert add_memo("const Foo = 1;\n", "Foo") == "const Foo = 1;\n"


def test_module_path_reads_quoted_source() -> None:
    assert module_path("import a from './a';") == "./a"
    assert module_path('import b from "lodash"') == "lodash"
    assert module_path("./c") == "./c"


def test_group_imports_orders_framework_third_party_then_relative() -> None:
    assert group_imports(["./c", "react-router", "lodash"]) == ["react-router", "lodash", "./c"]


def test_group_imports_sorts_each_bucket() -> None:
    imports = [
        "import b from './b';",
        "import x from 'lodash';",
        "import React from 'react';",
        "import a from './a';",
        "import axios from 'axios';",
    ]

    assert group_imports(imports) == [
        "import React from 'react';",
        "import axios from 'axios';",
        "import x from 'lodash';",
        "import a from './a';",
        "import b from './b';",
    ]


def test_sort_imports_replaces_leading_block() -> None:
    content = (
        "import b from './b';\n"
        "import React from 'react';\n"
        "import x from 'lodash';\n"
        "const y = 1;\n"
    )
    imports = ["import b from './b';", "import React from 'react';", "import x from 'lodash';"]

    assert sort_imports(content, imports) == (
        "import React from 'react';\n"
        "import x from 'lodash';\n"
        "import b from './b';\n"
        "\n"
        "const y = 1;\n"
    )


def test_sort_imports_only_replaces_first_block() -> None:
    content = "import a from 'a';\n\nconst z = 1;\nimport b from 'b';\n"

    result = sort_imports(content, ["import a from 'a';", "import b from 'b';"])

    assert result == (
        "import a from 'a';\nimport b from 'b';\n\n"
        "\nconst z = 1;\nimport b from 'b';\n"
    )


def test_sort_imports_without_imports_is_noop() -> None:
    assert sort_imports("const a = 1;\n", []) == "const a = 1;\n"
