"""
Infix to Postfix Converter
==========================

This module implements Dijkstra's shunting-yard algorithm, turning an infix
token sequence into postfix (Reverse Polish) order.

Algorithm
---------
For each token, left to right:

1. ``(`` is pushed onto the operator stack.
2. ``)`` pops operators to the output until a ``(`` is found, which is
   discarded. If there is no ``(``, the ``)`` is ignored.
3. An operator first pops every stacked operator that binds tighter, or
   equally tight unless the incoming operator is right-associative (in
   the operator table only ``^`` is), then is pushed.
4. Anything else (numbers, identifiers, stray characters) goes straight
   to the output.

When the input is exhausted every remaining stack entry, including any
unmatched ``(``, is appended to the output.

Conversion never fails. Malformed input yields a postfix sequence that may
not evaluate; the error surfaces in the evaluator instead.

Example Usage
-------------
>>> from stacklab.converter import convert_infix_to_postfix
>>> convert_infix_to_postfix("(2+3)*4")
'2 3 + 4 *'
>>> convert_infix_to_postfix("2^3^2")
'2 3 2 ^ ^'
"""

import logging
from typing import Union

from stacklab.operators import operator_info, precedence
from stacklab.stack import BoundedStack
from stacklab.tokenizer import Token, TokenType, tokenize

logger = logging.getLogger(__name__)


class InfixToPostfixConverter:
    """
    Converts infix tokens to postfix tokens.

    The operator stack is a BoundedStack sized to the token count, which is
    the most it can ever hold.
    """

    def convert(self, source: Union[str, list[Token]]) -> list[Token]:
        """
        Convert an infix expression to postfix order.

        Args:
            source: Raw infix text, or tokens produced by the tokenizer

        Returns:
            The postfix tokens in output order
        """
        tokens = tokenize(source) if isinstance(source, str) else list(source)
        operators: BoundedStack[Token] = BoundedStack(max(1, len(tokens)))
        output: list[Token] = []

        for token in tokens:
            if token.type is TokenType.LPAREN:
                operators.push(token)
            elif token.type is TokenType.RPAREN:
                self._close_group(token, operators, output)
            elif token.type is TokenType.OPERATOR:
                self._pop_bound_operators(token, operators, output)
                operators.push(token)
            else:
                output.append(token)

        while not operators.is_empty():
            token = operators.pop()
            if token.type is TokenType.LPAREN:
                logger.debug(f"unmatched '(' at column {token.column} copied to output")
            output.append(token)

        logger.debug(f"postfix: {' '.join(t.text for t in output)}")
        return output

    def to_string(self, source: Union[str, list[Token]]) -> str:
        """Convert and join the postfix tokens with single spaces."""
        return " ".join(token.text for token in self.convert(source))

    def _close_group(
        self,
        rparen: Token,
        operators: BoundedStack[Token],
        output: list[Token],
    ) -> None:
        while not operators.is_empty() and operators.peek().type is not TokenType.LPAREN:
            output.append(operators.pop())

        if operators.is_empty():
            logger.debug(f"unmatched ')' at column {rparen.column} ignored")
        else:
            operators.pop()  # discard '('

    def _pop_bound_operators(
        self,
        incoming: Token,
        operators: BoundedStack[Token],
        output: list[Token],
    ) -> None:
        incoming_prec = precedence(incoming.text)
        info = operator_info(incoming.text)
        right_associative = info is not None and info.is_right_associative

        while not operators.is_empty() and operators.peek().is_operator:
            top_prec = precedence(operators.peek().text)
            if top_prec > incoming_prec or (
                top_prec == incoming_prec and not right_associative
            ):
                output.append(operators.pop())
            else:
                break


def convert_infix_to_postfix(expr: str) -> str:
    """
    Convert an infix expression to a space-separated postfix string.

    Never raises; malformed input produces a possibly unusable result.
    """
    return InfixToPostfixConverter().to_string(expr)
