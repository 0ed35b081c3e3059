# src/monkey/error_reporter.py
"""
Source-aware syntax error reporting.

The lexer registers every source it reads so that errors can quote the
offending line with a caret under the column.
"""


class MonkeySyntaxError(Exception):
    def __init__(self, message, line=None, column=None, filename="<stdin>", suggestion=None, source_line=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        self.suggestion = suggestion
        self.source_line = source_line

    def location(self):
        if self.line is None:
            return self.filename
        if self.column is None:
            return f"{self.filename}:{self.line}"
        return f"{self.filename}:{self.line}:{self.column}"

    def format_error(self):
        lines = [f"{self.location()}: {self.message}"]
        if self.source_line is not None:
            lines.append(f"    {self.source_line}")
            if self.column:
                lines.append("    " + " " * (self.column - 1) + "^")
        if self.suggestion:
            lines.append(f"  hint: {self.suggestion}")
        return "\n".join(lines)

    def __str__(self):
        return f"{self.location()}: {self.message}"


class ErrorReporter:
    def __init__(self):
        self.sources = {}

    def register_source(self, filename, source_code):
        self.sources[filename] = source_code.splitlines()

    def get_source_line(self, filename, line):
        lines = self.sources.get(filename)
        if not lines or line is None or line < 1 or line > len(lines):
            return None
        return lines[line - 1]

    def report_error(self, error_class, message, line=None, column=None, filename="<stdin>", suggestion=None):
        """Build (but do not raise) an error carrying the quoted source line."""
        return error_class(
            message,
            line=line,
            column=column,
            filename=filename,
            suggestion=suggestion,
            source_line=self.get_source_line(filename, line),
        )

    def clear(self):
        self.sources.clear()


_error_reporter = None


def get_error_reporter():
    global _error_reporter
    if _error_reporter is None:
        _error_reporter = ErrorReporter()
    return _error_reporter
