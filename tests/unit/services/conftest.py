from dataclasses import dataclass

import pytest


@dataclass
class FakeLambdaContext:
    """Powertools の inject_lambda_context が参照する属性だけを持つ Context"""

    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    """全テスト共通の LambdaContext フィクスチャ"""
    return FakeLambdaContext()
