"""
Node kind vocabularies.

NodeType: output `type` strings (Mozilla Parser API / ESTree).
NativeKind: tree-sitter-javascript node kinds the bridge converts.
"""

from enum import Enum


class NodeType(str, Enum):
    """Standardized node types"""

    ARRAY_EXPRESSION = "ArrayExpression"
    ARRAY_PATTERN = "ArrayPattern"
    ARROW_FUNCTION_EXPRESSION = "ArrowFunctionExpression"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    ASSIGNMENT_PATTERN = "AssignmentPattern"
    AWAIT_EXPRESSION = "AwaitExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    BLOCK = "Block"  # block comments
    BLOCK_STATEMENT = "BlockStatement"
    BREAK_STATEMENT = "BreakStatement"
    CALL_EXPRESSION = "CallExpression"
    CATCH_CLAUSE = "CatchClause"
    CLASS_BODY = "ClassBody"
    CLASS_DECLARATION = "ClassDeclaration"
    CLASS_EXPRESSION = "ClassExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    CONTINUE_STATEMENT = "ContinueStatement"
    DEBUGGER_STATEMENT = "DebuggerStatement"
    DO_WHILE_STATEMENT = "DoWhileStatement"
    EMPTY_STATEMENT = "EmptyStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    FOR_IN_STATEMENT = "ForInStatement"
    FOR_OF_STATEMENT = "ForOfStatement"
    FOR_STATEMENT = "ForStatement"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    FUNCTION_EXPRESSION = "FunctionExpression"
    IDENTIFIER = "Identifier"
    IF_STATEMENT = "IfStatement"
    LABELED_STATEMENT = "LabeledStatement"
    LITERAL = "Literal"
    LOGICAL_EXPRESSION = "LogicalExpression"
    MEMBER_EXPRESSION = "MemberExpression"
    META_PROPERTY = "MetaProperty"
    METHOD_DEFINITION = "MethodDefinition"
    NEW_EXPRESSION = "NewExpression"
    OBJECT_EXPRESSION = "ObjectExpression"
    OBJECT_PATTERN = "ObjectPattern"
    PROGRAM = "Program"
    PROPERTY = "Property"
    REST_ELEMENT = "RestElement"
    RETURN_STATEMENT = "ReturnStatement"
    SEQUENCE_EXPRESSION = "SequenceExpression"
    SPREAD_ELEMENT = "SpreadElement"
    SUPER = "Super"
    SWITCH_CASE = "SwitchCase"
    SWITCH_STATEMENT = "SwitchStatement"
    TAGGED_TEMPLATE_EXPRESSION = "TaggedTemplateExpression"
    TEMPLATE_ELEMENT = "TemplateElement"
    TEMPLATE_LITERAL = "TemplateLiteral"
    THIS_EXPRESSION = "ThisExpression"
    THROW_STATEMENT = "ThrowStatement"
    TRY_STATEMENT = "TryStatement"
    UNARY_EXPRESSION = "UnaryExpression"
    UPDATE_EXPRESSION = "UpdateExpression"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    WHILE_STATEMENT = "WhileStatement"
    WITH_STATEMENT = "WithStatement"
    YIELD_EXPRESSION = "YieldExpression"


class NativeKind(str, Enum):
    """tree-sitter-javascript node kinds with a converter"""

    # Program / statements
    PROGRAM = "program"
    EXPRESSION_STATEMENT = "expression_statement"
    VARIABLE_DECLARATION = "variable_declaration"
    LEXICAL_DECLARATION = "lexical_declaration"
    VARIABLE_DECLARATOR = "variable_declarator"
    STATEMENT_BLOCK = "statement_block"
    EMPTY_STATEMENT = "empty_statement"
    IF_STATEMENT = "if_statement"
    SWITCH_STATEMENT = "switch_statement"
    SWITCH_CASE = "switch_case"
    SWITCH_DEFAULT = "switch_default"
    FOR_STATEMENT = "for_statement"
    FOR_IN_STATEMENT = "for_in_statement"
    WHILE_STATEMENT = "while_statement"
    DO_STATEMENT = "do_statement"
    TRY_STATEMENT = "try_statement"
    CATCH_CLAUSE = "catch_clause"
    WITH_STATEMENT = "with_statement"
    BREAK_STATEMENT = "break_statement"
    CONTINUE_STATEMENT = "continue_statement"
    RETURN_STATEMENT = "return_statement"
    THROW_STATEMENT = "throw_statement"
    DEBUGGER_STATEMENT = "debugger_statement"
    LABELED_STATEMENT = "labeled_statement"

    # Functions / classes
    FUNCTION_DECLARATION = "function_declaration"
    GENERATOR_FUNCTION_DECLARATION = "generator_function_declaration"
    FUNCTION_EXPRESSION = "function_expression"
    FUNCTION = "function"  # older grammar name of function_expression
    GENERATOR_FUNCTION = "generator_function"
    ARROW_FUNCTION = "arrow_function"
    CLASS_DECLARATION = "class_declaration"
    CLASS = "class"
    CLASS_BODY = "class_body"
    METHOD_DEFINITION = "method_definition"

    # Expressions
    PARENTHESIZED_EXPRESSION = "parenthesized_expression"
    SEQUENCE_EXPRESSION = "sequence_expression"
    ASSIGNMENT_EXPRESSION = "assignment_expression"
    AUGMENTED_ASSIGNMENT_EXPRESSION = "augmented_assignment_expression"
    BINARY_EXPRESSION = "binary_expression"
    UNARY_EXPRESSION = "unary_expression"
    UPDATE_EXPRESSION = "update_expression"
    TERNARY_EXPRESSION = "ternary_expression"
    CALL_EXPRESSION = "call_expression"
    NEW_EXPRESSION = "new_expression"
    MEMBER_EXPRESSION = "member_expression"
    SUBSCRIPT_EXPRESSION = "subscript_expression"
    YIELD_EXPRESSION = "yield_expression"
    AWAIT_EXPRESSION = "await_expression"
    SPREAD_ELEMENT = "spread_element"
    META_PROPERTY = "meta_property"
    ARRAY = "array"
    OBJECT = "object"
    PAIR = "pair"

    # Patterns
    ARRAY_PATTERN = "array_pattern"
    OBJECT_PATTERN = "object_pattern"
    PAIR_PATTERN = "pair_pattern"
    ASSIGNMENT_PATTERN = "assignment_pattern"
    OBJECT_ASSIGNMENT_PATTERN = "object_assignment_pattern"
    REST_PATTERN = "rest_pattern"

    # Names
    IDENTIFIER = "identifier"
    PROPERTY_IDENTIFIER = "property_identifier"
    SHORTHAND_PROPERTY_IDENTIFIER = "shorthand_property_identifier"
    SHORTHAND_PROPERTY_IDENTIFIER_PATTERN = "shorthand_property_identifier_pattern"
    STATEMENT_IDENTIFIER = "statement_identifier"
    UNDEFINED = "undefined"
    SUPER = "super"

    # Literals
    NUMBER = "number"
    STRING = "string"
    TEMPLATE_STRING = "template_string"
    REGEX = "regex"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    THIS = "this"

    COMMENT = "comment"


# Kinds introduced after ES5, with the ecma_version they require
KIND_MIN_VERSION: dict[NativeKind, int] = {
    NativeKind.LEXICAL_DECLARATION: 2015,
    NativeKind.GENERATOR_FUNCTION_DECLARATION: 2015,
    NativeKind.GENERATOR_FUNCTION: 2015,
    NativeKind.ARROW_FUNCTION: 2015,
    NativeKind.CLASS_DECLARATION: 2015,
    NativeKind.CLASS: 2015,
    NativeKind.CLASS_BODY: 2015,
    NativeKind.YIELD_EXPRESSION: 2015,
    NativeKind.SPREAD_ELEMENT: 2015,
    NativeKind.META_PROPERTY: 2015,
    NativeKind.ARRAY_PATTERN: 2015,
    NativeKind.OBJECT_PATTERN: 2015,
    NativeKind.PAIR_PATTERN: 2015,
    NativeKind.ASSIGNMENT_PATTERN: 2015,
    NativeKind.OBJECT_ASSIGNMENT_PATTERN: 2015,
    NativeKind.REST_PATTERN: 2015,
    NativeKind.SHORTHAND_PROPERTY_IDENTIFIER: 2015,
    NativeKind.SHORTHAND_PROPERTY_IDENTIFIER_PATTERN: 2015,
    NativeKind.SUPER: 2015,
    NativeKind.TEMPLATE_STRING: 2015,
    NativeKind.AWAIT_EXPRESSION: 2017,
}

# Logical operators get their own node type
LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})

# Operators introduced after ES5, with the ecma_version they require
OPERATOR_MIN_VERSION: dict[str, int] = {
    "**": 2016,
    "**=": 2016,
    "??": 2020,
    "&&=": 2021,
    "||=": 2021,
    "??=": 2021,
}
