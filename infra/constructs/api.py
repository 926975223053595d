from aws_cdk import aws_apigatewayv2 as apigwv2
from aws_cdk import aws_lambda as _lambda
from aws_cdk.aws_apigatewayv2_integrations import HttpLambdaIntegration
from constructs import Construct


class Api(Construct):
    """API Gateway (HTTP API) Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        calculate_split: _lambda.IFunction,
        edit_split: _lambda.IFunction,
        restore_split: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        # 静的ページからブラウザで直接呼び出すため CORS を許可
        self.http_api = apigwv2.HttpApi(
            self,
            "SplitHttpApi",
            api_name="Hotel Split API",
            cors_preflight=apigwv2.CorsPreflightOptions(
                allow_origins=["*"],
                allow_methods=[apigwv2.CorsHttpMethod.POST],
                allow_headers=["Content-Type"],
            ),
        )

        routes = {
            "/splits/calculate": ("CalculateSplit", calculate_split),
            "/splits/edit": ("EditSplit", edit_split),
            "/splits/restore": ("RestoreSplit", restore_split),
        }
        for path, (name, fn) in routes.items():
            self.http_api.add_routes(
                path=path,
                methods=[apigwv2.HttpMethod.POST],
                integration=HttpLambdaIntegration(f"{name}Integration", fn),
            )
