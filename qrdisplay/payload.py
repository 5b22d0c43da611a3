# -*- coding: utf-8 -*-
"""Value encoded into the payment request code."""

import json
from typing import Optional, Union

PAYMENT_TYPE = 'XJO_PAYMENT'


def payment_payload(code: str, amount: Union[str, int, float], sender: Optional[str] = None) -> str:
    """
    Build the compact JSON string shown as a payment request code.

    Keys keep the order type, code, amount, sender. ``sender`` is left out
    when unknown. Non-ASCII characters are kept as-is since they feed the
    checksum.

    Example:
        >>> payment_payload("482913", "25.00", "Ana")
        '{"type":"XJO_PAYMENT","code":"482913","amount":"25.00","sender":"Ana"}'
    """
    data = {'type': PAYMENT_TYPE, 'code': code, 'amount': amount}
    if sender is not None:
        data['sender'] = sender
    return json.dumps(data, separators=(',', ':'), ensure_ascii=False)
