from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Functions, Layers


class HotelSplitStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        currency_symbol: str = "$",
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            common_layer=layers.common_layer,
            currency_symbol=currency_symbol,
        )

        api = Api(
            self,
            "Api",
            calculate_split=fns.calculate_split,
            edit_split=fns.edit_split,
            restore_split=fns.restore_split,
        )

        CfnOutput(self, "ApiUrl", value=api.http_api.api_endpoint)
