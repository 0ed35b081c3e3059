# src/monkey/lexer.py
from .monkey_token import *
from .error_reporter import get_error_reporter, MonkeySyntaxError

_KEYWORDS = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}

_SINGLE_CHAR_TOKENS = {
    '+': PLUS,
    '-': MINUS,
    '*': STAR,
    '/': SLASH,
    '<': LT,
    '>': GT,
    ',': COMMA,
    ';': SEMICOLON,
    ':': COLON,
    '(': LPAREN,
    ')': RPAREN,
    '{': LBRACE,
    '}': RBRACE,
    '[': LBRACKET,
    ']': RBRACKET,
}

_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '\\': '\\',
    '"': '"',
    "'": "'",
}


class Lexer:
    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.filename = filename

        # Register source with error reporter
        self.error_reporter = get_error_reporter()
        self.error_reporter.register_source(filename, source_code)

        self.read_char()

    def read_char(self):
        if self.ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        self.position = self.read_position
        self.read_position += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace()

        # Skip single line comments (both # and // styles)
        while self.ch == '#' or (self.ch == '/' and self.peek_char() == '/'):
            self.skip_comment()

        line = self.line
        column = self.column

        if self.ch == "":
            return Token(EOF, "", line, column)

        if self.ch == '=':
            if self.peek_char() == '=':
                self.read_char()
                tok = Token(EQ, "==", line, column)
            else:
                tok = Token(ASSIGN, "=", line, column)
        elif self.ch == '!':
            if self.peek_char() == '=':
                self.read_char()
                tok = Token(NOT_EQ, "!=", line, column)
            else:
                tok = Token(BANG, "!", line, column)
        elif self.ch == '"':
            # read_string leaves self.ch on the closing quote
            tok = Token(STRING, self.read_string(), line, column)
        elif self.ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[self.ch], self.ch, line, column)
        elif self.is_letter(self.ch):
            literal = self.read_identifier()
            return Token(self.lookup_ident(literal), literal, line, column)
        elif self.is_digit(self.ch):
            return Token(INT, self.read_number(), line, column)
        else:
            tok = Token(ILLEGAL, self.ch, line, column)

        self.read_char()
        return tok

    def tokenize(self):
        """Drain the lexer, returning every token up to and including EOF."""
        tokens = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.type == EOF:
                return tokens

    def skip_comment(self):
        while self.ch != '\n' and self.ch != "":
            self.read_char()
        self.skip_whitespace()

    def read_string(self):
        start_line = self.line
        start_column = self.column
        result = []
        while True:
            self.read_char()
            if self.ch == "":
                raise self.error_reporter.report_error(
                    MonkeySyntaxError,
                    "Unterminated string literal",
                    line=start_line,
                    column=start_column,
                    filename=self.filename,
                    suggestion="Add a closing quote \" to terminate the string."
                )
            elif self.ch == '\\':
                self.read_char()
                if self.ch == "":
                    raise self.error_reporter.report_error(
                        MonkeySyntaxError,
                        "Incomplete escape sequence at end of file",
                        line=self.line,
                        column=self.column,
                        filename=self.filename,
                        suggestion="Remove the backslash or complete the escape sequence."
                    )
                result.append(_ESCAPES.get(self.ch, self.ch))
            elif self.ch == '"':
                break
            else:
                result.append(self.ch)
        return ''.join(result)

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch) or self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def lookup_ident(self, ident):
        return _KEYWORDS.get(ident, IDENT)

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'

    def is_digit(self, char):
        return '0' <= char <= '9'

    def skip_whitespace(self):
        while self.ch in [' ', '\t', '\n', '\r']:
            self.read_char()
