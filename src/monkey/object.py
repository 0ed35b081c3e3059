# src/monkey/object.py
"""
Runtime values.

Every value the evaluator produces is an ``Object``. ``ReturnValue`` and
``EvaluationError`` are control wrappers: they only travel up through the
evaluator and are never bound to a name or stored inside an Array or Hash.
"""

INTEGER_OBJ = "INTEGER"
BOOLEAN_OBJ = "BOOLEAN"
STRING_OBJ = "STRING"
NULL_OBJ = "NULL"
ARRAY_OBJ = "ARRAY"
HASH_OBJ = "HASH"
FUNCTION_OBJ = "FUNCTION"
BUILTIN_OBJ = "BUILTIN"
RETURN_VALUE_OBJ = "RETURN_VALUE"
ERROR_OBJ = "ERROR"

INT32_MIN, INT32_MAX = -2 ** 31, 2 ** 31 - 1


def to_int32(value):
    """Wrap a Python int to signed 32-bit two's complement."""
    return (value - INT32_MIN) % 2 ** 32 + INT32_MIN


class HashKey:
    __slots__ = ("type", "value")

    def __init__(self, type, value):
        self.type = type
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, HashKey):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        return f"HashKey({self.type}, {self.value!r})"


class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def describe(self):
        """Variant-and-value form used inside error messages, e.g. ``Integer(5)``."""
        return self.inspect()

    def hash_key(self):
        return None

    def __repr__(self):
        return self.describe()


class Integer(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return INTEGER_OBJ
    def describe(self): return f"Integer({self.value})"
    def hash_key(self): return HashKey(INTEGER_OBJ, self.value)

    def __eq__(self, other):
        return isinstance(other, Integer) and self.value == other.value


class Boolean(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return "true" if self.value else "false"
    def type(self): return BOOLEAN_OBJ
    def describe(self): return f"Boolean({self.inspect()})"
    def hash_key(self): return HashKey(BOOLEAN_OBJ, 1 if self.value else 0)

    def __eq__(self, other):
        return isinstance(other, Boolean) and self.value == other.value


class String(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return STRING_OBJ
    def describe(self): return f'String("{self.value}")'
    def hash_key(self): return HashKey(STRING_OBJ, self.value)
    def __str__(self): return self.value

    def __eq__(self, other):
        return isinstance(other, String) and self.value == other.value


class Null(Object):
    def inspect(self): return "null"
    def type(self): return NULL_OBJ
    def describe(self): return "Null"

    def __eq__(self, other):
        return isinstance(other, Null)


class Array(Object):
    def __init__(self, elements): self.elements = elements
    def type(self): return ARRAY_OBJ

    def inspect(self):
        elements_str = ", ".join([el.inspect() for el in self.elements])
        return f"[{elements_str}]"

    def describe(self):
        elements_str = ", ".join([el.describe() for el in self.elements])
        return f"Array([{elements_str}])"

    def __eq__(self, other):
        return isinstance(other, Array) and self.elements == other.elements


class HashPair:
    """A hash entry keeps the original key object so it can be displayed."""
    def __init__(self, key, value):
        self.key = key
        self.value = value

    def __eq__(self, other):
        return isinstance(other, HashPair) and self.key == other.key and self.value == other.value

    def __repr__(self):
        return f"HashPair({self.key.describe()}, {self.value.describe()})"


class Hash(Object):
    def __init__(self, pairs=None):
        self.pairs = pairs if pairs is not None else {}  # HashKey -> HashPair

    def type(self): return HASH_OBJ

    def inspect(self):
        pairs = [f"{p.key.inspect()}: {p.value.inspect()}" for p in self.pairs.values()]
        return "{" + ", ".join(pairs) + "}"

    def describe(self):
        pairs = [f"{p.key.describe()}: {p.value.describe()}" for p in self.pairs.values()]
        return "Hash({" + ", ".join(pairs) + "})"

    def __eq__(self, other):
        return isinstance(other, Hash) and self.pairs == other.pairs


class Function(Object):
    """A closure: parameters and body plus the environment it was defined in."""
    def __init__(self, parameters, body, env):
        self.parameters, self.body, self.env = parameters, body, env

    def type(self): return FUNCTION_OBJ

    def inspect(self):
        params = ", ".join([p.value for p in self.parameters])
        return f"fn({params}) {{\n{self.body}\n}}"

    def describe(self):
        params = ", ".join([p.value for p in self.parameters])
        return f"Function(fn({params}))"


class Builtin(Object):
    def __init__(self, fn, name=""):
        self.fn = fn  # Stores the native Python function
        self.name = name

    def inspect(self): return f"<built-in function: {self.name}>"
    def type(self): return BUILTIN_OBJ
    def describe(self): return f"Builtin({self.name})"

    def __eq__(self, other):
        return isinstance(other, Builtin) and self.name == other.name


class ReturnValue(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return RETURN_VALUE_OBJ
    def describe(self): return f"ReturnValue({self.value.describe()})"


class EvaluationError(Object):
    def __init__(self, message): self.message = message
    def inspect(self): return f"ERROR: {self.message}"
    def type(self): return ERROR_OBJ
    def describe(self): return f'Error("{self.message}")'
    def __str__(self): return self.message
