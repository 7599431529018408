"""Example: Payment notification handler

This example decodes a payment gateway's asynchronous notification, checks
the result fields, and builds the XML acknowledgement the gateway expects.

A malformed or hostile body never raises: it decodes to {} and the handler
replies with a FAIL acknowledgement instead.
"""

import logging

from hookxml import encode, label_sequence, try_decode


NOTIFICATION = """<xml>
  <appid><![CDATA[wx2421b1c4370ec43b]]></appid>
  <mch_id><![CDATA[10000100]]></mch_id>
  <out_trade_no><![CDATA[1409811653]]></out_trade_no>
  <result_code><![CDATA[SUCCESS]]></result_code>
  <return_code><![CDATA[SUCCESS]]></return_code>
  <total_fee>1</total_fee>
  <coupon_id>10000</coupon_id>
  <coupon_id>10001</coupon_id>
</xml>"""


def handle_notification(body: str) -> str:
    result = try_decode(body)
    if not result.ok:
        return encode({"return_code": "FAIL", "return_msg": "invalid payload"})

    data = result.data
    coupons = data.get("coupon_id", [])
    if isinstance(coupons, str):
        coupons = [coupons]
    print(f"Order {data['out_trade_no']}: {data['result_code']}, fee {data['total_fee']}, coupons {coupons}")

    return encode({
        "return_code": "SUCCESS",
        "return_msg": "OK",
        "coupon_id": label_sequence(coupons, "coupon_id"),
    })


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    print(handle_notification(NOTIFICATION))
    print(handle_notification("<html><body>502 Bad Gateway</body>"))
