# src/monkey/environment.py


class Environment:
    """One scope of name bindings plus a link to the enclosing scope.

    ``outer`` is fixed at construction. Closures hold a reference to the
    environment they were defined in, so a binding added here later is
    visible to every closure created in this scope or below it.
    """

    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    @classmethod
    def new_global(cls):
        return cls()

    @classmethod
    def new_enclosed(cls, outer):
        return cls(outer=outer)

    # ---- Mapping protocol helpers -------------------------------------------------

    def __contains__(self, name):
        if name in self.store:
            return True
        if self.outer is not None:
            return name in self.outer
        return False

    def items(self):
        return self.store.items()

    # ---- Core environment operations ---------------------------------------------

    def get(self, name, default=None):
        """Get a value from this scope or the nearest enclosing one."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return default

    def set(self, name, value):
        """Bind in this scope only; shadows any outer binding."""
        self.store[name] = value
        return value

    def __repr__(self):
        return f"Environment(names={sorted(self.store)}, enclosed={self.outer is not None})"
