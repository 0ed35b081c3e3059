# src/monkey/evaluator/statements.py
from ..object import ReturnValue, EvaluationError
from .utils import is_control, is_error, debug_log, NULL


class StatementEvaluatorMixin:
    """Handles evaluation of statement sequences, bindings and return."""

    def eval_program(self, node, env):
        debug_log("eval_program", f"Processing {len(node.statements)} statements")

        result = NULL
        for i, stmt in enumerate(node.statements):
            debug_log(f"  Statement {i+1}", type(stmt).__name__)
            result = self.eval_node(stmt, env)

            # A top-level return ends the program with the unwrapped value.
            if isinstance(result, ReturnValue):
                debug_log("  ReturnValue encountered", result.value)
                return result.value
            if is_error(result):
                debug_log("  Error encountered", result)
                return result

        debug_log("eval_program completed", result)
        return result

    def eval_block_statement(self, block, env):
        debug_log("eval_block_statement", f"len={len(block.statements)}")

        result = NULL
        for stmt in block.statements:
            result = self.eval_node(stmt, env)

            # Returns stay wrapped so the enclosing call, not this block, unwraps them.
            if isinstance(result, (ReturnValue, EvaluationError)):
                debug_log("  Block interrupted", result)
                return result

        return result

    def eval_expression_statement(self, node, env):
        return self.eval_node(node.expression, env)

    def eval_let_statement(self, node, env):
        debug_log("eval_let_statement", f"let {node.name.value}")

        value = self.eval_node(node.value, env)
        if is_control(value):
            return value

        return env.set(node.name.value, value)

    def eval_return_statement(self, node, env):
        val = self.eval_node(node.return_value, env)
        if is_control(val):
            return val
        return ReturnValue(val)
