"""Errors raised by the filter builders and the filter compiler."""


class FilterContractError(ValueError):
    """A filter or filter entry does not satisfy the compiler's input contract.

    Raised for non-OR input to the OR compiler, OR filters without params,
    entries that are neither filters nor filter groups, and primitive filters
    without a compiled single-key query.
    """
