import logging

from projecthub.application.ports.project_lite_port import ProjectLitePort
from projecthub.domain.errors import ConfigurationError, UpstreamConnectionError, UpstreamHttpError
from projecthub.domain.integrations import IntegrationResult
from projecthub.domain.project import Project

logger = logging.getLogger(__name__)


class GetProjectLiteSummaryUseCase:
    """Project-Lite 보드 요약을 그대로 중계하는 프록시 Use Case"""

    def __init__(self, project_lite_port: ProjectLitePort):
        self.project_lite_port = project_lite_port

    async def execute(self, project: Project) -> IntegrationResult:
        logger.info("📋 GetProjectLiteSummaryUseCase 실행: project_id=%s, board_id=%s", project.id, project.pl_board_id)

        if not project.pl_board_id:
            return IntegrationResult.failure(404, "Project-Lite Board ID not set")

        try:
            data = await self.project_lite_port.get_board_summary(project.pl_board_id)
        except ConfigurationError:
            return IntegrationResult.failure(500, "Server Configuration Error")
        except UpstreamHttpError as e:
            logger.warning(
                "Project-Lite API 오류: project_id=%s, status=%d, body=%s",
                project.id, e.status_code, e.body,
            )
            # 원격 오류는 재해석하지 않고 본문과 상태 코드를 그대로 전달
            return IntegrationResult(status_code=e.status_code, body=e.body)
        except UpstreamConnectionError as e:
            logger.error("Project-Lite 연결 실패: project_id=%s, error=%s", project.id, e.message)
            return IntegrationResult.failure(500, "Connection error occurred")

        logger.info("✅ Project-Lite 요약 조회 완료: board_id=%s", project.pl_board_id)
        return IntegrationResult.success(data)
