from collections.abc import Iterator

from patterndetect.parsing.blocks import count_lines_of_code, extract_blocks, starts_region

ADD = "\n".join(
    [
        "import helpers from './helpers';",
        "",
        "function add(a, b) {",
        "  const sum = a + b;",
        "  // keep a trace",
        "  log(sum);",
        "  check(sum);",
        "  return sum;",
        "}",
    ]
)


def test_extract_single_function():
    blocks = list(extract_blocks(ADD, 5))
    assert len(blocks) == 1
    block = blocks[0]
    assert block.start_line == 3
    assert block.lines_of_code == 6
    assert block.content.startswith("function add(a, b) {")
    assert block.content.endswith("}")
    assert block.pattern_type == "utility"


def test_extract_is_lazy():
    assert isinstance(extract_blocks(ADD, 5), Iterator)


def test_short_region_is_discarded():
    source = "function tiny() {\n  return 1;\n}\n"
    assert list(extract_blocks(source, 5)) == []


def test_comment_lines_do_not_count_towards_minimum():
    source = "\n".join(
        [
            "function sparse() {",
            "  // one",
            "",
            "  /* two */",
            "  run();",
            "}",
        ]
    )
    assert list(extract_blocks(source, 4)) == []
    assert len(list(extract_blocks(source, 3))) == 1


def test_unclosed_region_never_emits():
    source = "function open() {\n  a();\n  b();\n  c();\n  d();\n  e();\n"
    assert list(extract_blocks(source, 5)) == []


def test_region_opened_inside_outer_braces_closes_with_outer_depth():
    source = "\n".join(
        [
            "const handlers = {",
            "  onSave: function (event) {",
            "    persist(event);",
            "    notify(event);",
            "    refresh();",
            "  },",
            "};",
        ]
    )
    blocks = list(extract_blocks(source, 5))
    assert len(blocks) == 1
    assert blocks[0].start_line == 2
    assert blocks[0].content.endswith("};")


def test_consecutive_functions_are_separate_blocks():
    body = ["  first();", "  second();", "  third();", "  fourth();"]
    source = "\n".join(["function one() {", *body, "}", "function two() {", *body, "}"])
    blocks = list(extract_blocks(source, 5))
    assert [b.start_line for b in blocks] == [1, 7]


def test_malformed_input_degrades_quietly():
    assert list(extract_blocks("}}}}\n{{{\n=> =>", 1)) == []
    assert list(extract_blocks("", 5)) == []


def test_starts_region_shapes():
    assert starts_region("export async function load(id) {")
    assert starts_region("export const load = async (id) => {")
    assert starts_region("const load = (id) {")
    assert starts_region("items.map((x) => x * 2)")
    assert not starts_region("const value = compute(1);")


def test_count_lines_of_code_skips_blank_and_comments():
    lines = ["a();", "", "   ", "// note", "/* block", " * middle", " */", "b();"]
    assert count_lines_of_code(lines) == 2


def test_generator_method_lines_count_as_code():
    source = "\n".join(
        [
            "function makeWalker(root) {",
            "  return {",
            "    *walk(node) {",
            "      yield node;",
            "    },",
            "  };",
            "}",
        ]
    )
    blocks = list(extract_blocks(source, 7))
    assert len(blocks) == 1
    assert blocks[0].lines_of_code == 7


def test_star_lines_are_comments_only_inside_block_comments():
    lines = ["/**", " * Docs.", " */", "*gen() {", "  yield 1;", "}"]
    assert count_lines_of_code(lines) == 3
