"""상태 확인 라우트 테스트"""


async def test_health_endpoint(async_client):
    """상태 확인 엔드포인트 테스트"""
    response = await async_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_healthz_reports_ok(async_client):
    response = await async_client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
