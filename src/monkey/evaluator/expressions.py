# src/monkey/evaluator/expressions.py
from ..object import (
    Integer, String, Array, Hash, HashPair, Function, to_int32
)
from .utils import (
    is_control, debug_log, new_error, native_bool_to_boolean_obj,
    NULL, TRUE, FALSE, is_truthy
)


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: Literals, Math, Logic, Identifiers."""

    def eval_identifier(self, node, env):
        debug_log("eval_identifier", f"Looking up: {node.value}")

        # User bindings shadow builtins
        val = env.get(node.value)
        if val is not None:
            return val

        builtin = self.builtins.get(node.value)
        if builtin is not None:
            debug_log("  Found builtin", node.value)
            return builtin

        return new_error(f"identifier not found: {node.value}")

    def eval_integer_literal(self, node, env):
        return Integer(node.value)

    def eval_string_literal(self, node, env):
        return String(node.value)

    def eval_boolean(self, node, env):
        return native_bool_to_boolean_obj(node.value)

    def eval_array_literal(self, node, env):
        elements = self.eval_expressions(node.elements, env)
        if is_control(elements):
            return elements
        return Array(elements)

    def eval_hash_literal(self, node, env):
        debug_log("eval_hash_literal", f"{len(node.pairs)} pairs")

        pairs = {}
        for key_node, value_node in node.pairs:
            key = self.eval_node(key_node, env)
            if is_control(key):
                return key

            value = self.eval_node(value_node, env)
            if is_control(value):
                return value

            hash_key = key.hash_key()
            if hash_key is None:
                return new_error(f"hash key not support for {key.describe()}")
            pairs[hash_key] = HashPair(key, value)

        return Hash(pairs)

    def eval_function_literal(self, node, env):
        # Captures env by reference; later bindings in it stay visible.
        return Function(node.parameters, node.body, env)

    # === OPERATORS ===

    def eval_prefix_expression(self, node, env):
        debug_log("eval_prefix_expression", f"{node.operator} {node.right}")

        right = self.eval_node(node.right, env)
        if is_control(right):
            return right

        operator = node.operator
        if operator == "!":
            return FALSE if is_truthy(right) else TRUE
        elif operator == "-":
            if isinstance(right, Integer):
                return Integer(to_int32(-right.value))
            return new_error(f"unknown operator: -{right.describe()}")

        return new_error(f"unknown operator: {operator}{right.describe()}")

    def eval_infix_expression(self, node, env):
        debug_log("eval_infix_expression", f"{node.left} {node.operator} {node.right}")

        left = self.eval_node(node.left, env)
        if is_control(left):
            return left

        right = self.eval_node(node.right, env)
        if is_control(right):
            return right

        return self.apply_infix_operator(node.operator, left, right)

    def apply_infix_operator(self, operator, left, right):
        if isinstance(left, Integer) and isinstance(right, Integer):
            return self.eval_integer_infix(operator, left, right)
        if isinstance(left, String) and isinstance(right, String):
            return self.eval_string_infix(operator, left, right)

        if left.type() != right.type():
            return new_error(f"type mismatch: {left.describe()} {operator} {right.describe()}")

        # Same kind, neither Integer nor String: only structural equality.
        if operator == "==":
            return native_bool_to_boolean_obj(left == right)
        if operator == "!=":
            return native_bool_to_boolean_obj(left != right)
        return new_error(f"unknown operator: {left.describe()} {operator} {right.describe()}")

    def eval_integer_infix(self, operator, left, right):
        left_val = left.value
        right_val = right.value

        if operator == "+":
            return Integer(to_int32(left_val + right_val))
        elif operator == "-":
            return Integer(to_int32(left_val - right_val))
        elif operator == "*":
            return Integer(to_int32(left_val * right_val))
        elif operator == "/":
            if right_val == 0:
                return new_error("division by zero")
            # Truncate toward zero, not floor.
            quotient = abs(left_val) // abs(right_val)
            if (left_val < 0) != (right_val < 0):
                quotient = -quotient
            return Integer(to_int32(quotient))
        elif operator == "<":
            return native_bool_to_boolean_obj(left_val < right_val)
        elif operator == ">":
            return native_bool_to_boolean_obj(left_val > right_val)
        elif operator == "==":
            return native_bool_to_boolean_obj(left_val == right_val)
        elif operator == "!=":
            return native_bool_to_boolean_obj(left_val != right_val)

        return new_error(f"unknown operator: Integer {operator} Integer")

    def eval_string_infix(self, operator, left, right):
        if operator == "+":
            return String(left.value + right.value)
        return new_error(f"unknown operator: String {operator} String")

    # === CONTROL FLOW ===

    def eval_if_expression(self, node, env):
        debug_log("eval_if_expression", "Evaluating condition")

        condition = self.eval_node(node.condition, env)
        if is_control(condition):
            return condition

        if is_truthy(condition):
            debug_log("  Condition true, evaluating consequence")
            return self.eval_node(node.consequence, env)
        elif node.alternative is not None:
            debug_log("  Condition false, evaluating alternative")
            return self.eval_node(node.alternative, env)

        debug_log("  Condition false, no alternative")
        return NULL

    # === INDEXING ===

    def eval_index_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if is_control(left):
            return left

        index = self.eval_node(node.index, env)
        if is_control(index):
            return index

        if isinstance(left, Array):
            return self.eval_array_index(left, index)
        if isinstance(left, Hash):
            return self.eval_hash_index(left, index)
        return new_error(f"index operator not supported {left.describe()}")

    def eval_array_index(self, array, index):
        if not isinstance(index, Integer):
            return new_error(f"index operator not supported {index.describe()}")

        # An empty array reports max=-1.
        max_index = len(array.elements) - 1
        i = index.value
        if i < 0 or i > max_index:
            return new_error(f"index out of range: max={max_index} got={i}")
        return array.elements[i]

    def eval_hash_index(self, hash_obj, index):
        hash_key = index.hash_key()
        if hash_key is None:
            return new_error(f"unusable as hash key: {index.describe()}")

        pair = hash_obj.pairs.get(hash_key)
        if pair is None:
            return NULL
        return pair.value

    def eval_expressions(self, exps, env):
        """Evaluate left to right; the first control wrapper aborts the list."""
        results = []
        for e in exps:
            val = self.eval_node(e, env)
            if is_control(val):
                return val
            results.append(val)
        return results
