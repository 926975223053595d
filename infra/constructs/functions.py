import datetime

from aws_cdk import Duration
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

SERVICE_NAME = "split-service"


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        common_layer: _lambda.LayerVersion,
        currency_symbol: str = "$",
    ) -> None:
        super().__init__(scope, id)

        self._common_layer = common_layer
        self._currency_symbol = currency_symbol

        self.calculate_split = self._create_function(
            "CalculateSplitLambda",
            "services.split.handlers.calculate.lambda_handler",
        )

        self.edit_split = self._create_function(
            "EditSplitLambda",
            "services.split.handlers.edit.lambda_handler",
        )

        self.restore_split = self._create_function(
            "RestoreSplitLambda",
            "services.split.handlers.restore.lambda_handler",
        )

    @property
    def all_functions(self) -> list[_lambda.Function]:
        return [self.calculate_split, self.edit_split, self.restore_split]

    def _create_function(self, id: str, handler: str) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            memory_size=256,
            timeout=Duration.seconds(10),
            environment={
                "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
                "CURRENCY_SYMBOL": self._currency_symbol,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
