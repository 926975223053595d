#!/usr/bin/env python3

import aws_cdk as cdk

from hotel_split_stack import HotelSplitStack

app = cdk.App()
HotelSplitStack(
    app,
    "HotelSplitStack",
    currency_symbol=app.node.try_get_context("currency_symbol") or "$",
)

app.synth()
