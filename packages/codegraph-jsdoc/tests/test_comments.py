"""
Documentation comment attachment tests.
"""

import pytest

pytestmark = pytest.mark.unit


def doc_comment_occurrences(program, iter_nodes):
    """raw text of every attached or leftover doc comment"""
    found = []
    for node in iter_nodes(program):
        found.extend(c["raw"] for c in node.get("leadingComments", ()))
    found.extend(c["raw"] for c in program.get("trailingComments", ()))
    return found


class TestLeadingComments:
    """Doc comments attached to the node they precede"""

    def test_function_declaration(self, builder):
        """Test doc comment attaches to a function declaration."""
        program = builder.build("/** Adds. */\nfunction add(a, b) { return a + b; }")
        fn = program.body[0]

        assert len(fn.leadingComments) == 1
        comment = fn.leadingComments[0]
        assert comment.type == "Block"
        assert comment.value == "* Adds. "
        assert comment.raw == "/** Adds. */"
        assert list(comment.range) == [0, 12]
        assert "leadingComments" not in program
        assert "trailingComments" not in program

    def test_variable_declaration(self, builder):
        """Test doc comment attaches to a var declaration."""
        program = builder.build("/** Counter. */\nvar n = 0;")

        assert program.body[0].type == "VariableDeclaration"
        assert program.body[0].leadingComments[0].raw == "/** Counter. */"

    def test_assignment_gets_comment_not_statement(self, builder):
        """Test doc comment attaches to the assignment, not its statement."""
        program = builder.build("/** Handler. */\nfoo.bar = function () {};")
        stmt = program.body[0]

        assert "leadingComments" not in stmt
        assert stmt.expression.type == "AssignmentExpression"
        assert stmt.expression.leadingComments[0].raw == "/** Handler. */"

    def test_object_property(self, builder):
        """Test doc comment attaches to an object property."""
        program = builder.build("var o = {\n  /** Prop. */\n  a: 1,\n  b: 2\n};")
        a, b = program.body[0].declarations[0].init.properties

        assert a.leadingComments[0].raw == "/** Prop. */"
        assert "leadingComments" not in b

    def test_class_method(self, builder):
        """Test doc comment attaches to a class method."""
        program = builder.build("class A {\n  /** Method. */\n  m() {}\n}")
        method = program.body[0].body.body[0]

        assert method.type == "MethodDefinition"
        assert method.leadingComments[0].raw == "/** Method. */"
        assert "leadingComments" not in method.value

    def test_nested_function(self, builder):
        """Test doc comments attach inside function bodies."""
        program = builder.build("function outer() {\n  /** Inner. */\n  function inner() {}\n}")
        inner = program.body[0].body.body[0]

        assert inner.leadingComments[0].raw == "/** Inner. */"

    def test_ordinary_comments_do_not_attach(self, builder):
        """Test line and block comments are never leading comments."""
        program = builder.build("// line\n/* block */\nfunction f() {}")

        assert "leadingComments" not in program.body[0]
        assert "leadingComments" not in program
        assert [c.value for c in program.comments] == [" line", " block "]
        assert all(c.type == "Block" for c in program.comments)

    def test_empty_block_comment_is_not_documentation(self, builder):
        """Test /**/ is not a doc comment."""
        program = builder.build("/**/\nfunction f() {}")

        assert "leadingComments" not in program.body[0]
        assert len(program.comments) == 1

    def test_only_the_closest_of_consecutive_doc_comments_attaches(self, builder):
        """Test only the last of consecutive doc comments attaches."""
        program = builder.build("/** first */\n/** second */\nfunction f() {}")

        assert [c.raw for c in program.body[0].leadingComments] == ["/** second */"]
        assert [c.raw for c in program.leadingComments] == ["/** first */"]

    def test_ordinary_comment_breaks_the_link(self, builder):
        """Test an ordinary comment between doc and node blocks attachment."""
        program = builder.build("/** doc */\n// note\nfunction f() {}")

        assert "leadingComments" not in program.body[0]
        assert [c.raw for c in program.leadingComments] == ["/** doc */"]


class TestRootComments:
    """Leftover doc comments and the comments array"""

    def test_leading_and_trailing_leftovers(self, builder):
        """Test unattached comments split around the first statement."""
        program = builder.build("/** header */\nrun();\n/** footer */\n")

        assert [c.raw for c in program.leadingComments] == ["/** header */"]
        assert [c.raw for c in program.trailingComments] == ["/** footer */"]

    def test_comment_only_source_is_all_trailing(self, builder):
        """Test comment-only sources put everything in trailingComments."""
        program = builder.build("/** only */\n")

        assert len(program.body) == 0
        assert "leadingComments" not in program
        assert [c.raw for c in program.trailingComments] == ["/** only */"]

    def test_comments_array_in_source_order(self, builder):
        """Test Program comments are in source order."""
        source = "/** a */\nfunction f() {\n  // b\n}\n/* c */\n/** d */"
        program = builder.build(source)

        assert [c.raw for c in program.comments] == ["/** a */", "// b", "/* c */", "/** d */"]
        starts = [c.range[0] for c in program.comments]
        assert starts == sorted(starts)

    def test_comment_values_are_shared_not_duplicated(self, builder):
        """Test each comment value is one shared object."""
        program = builder.build("/** Adds. */\nfunction add() {}")

        assert program.body[0].leadingComments[0] is program.comments[0]

    def test_each_doc_comment_appears_exactly_once(self, builder, iter_nodes):
        """Test each doc comment is reachable exactly once from the Program."""
        source = """/** file header */
run();
/** f */
function f() {
  /** g */
  var g = 1;
}
var o = {
  /** p */
  p: 1
};
/** stray */
/** h */
h = 2;
/** end */
"""
        program = builder.build(source)
        occurrences = doc_comment_occurrences(program, iter_nodes)

        expected = ["/** file header */", "/** f */", "/** g */", "/** p */", "/** stray */", "/** h */", "/** end */"]
        assert sorted(occurrences) == sorted(expected)
        assert len(occurrences) == len(set(occurrences))
