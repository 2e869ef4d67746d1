"""
SchemaFlow - 데이터베이스 스키마 변경 관리 (GitOps)
FastAPI 메인 애플리케이션
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from alembic.config import Config as AlembicConfig
from alembic import command as alembic_command

from .core.config import settings, APP_VERSION
from .core.errors import StoreError
from .core.logging_config import setup_logging
from .api.v1.endpoints import health, projects, vcs, repositories, plan

# 로깅 설정 (파일 + 콘솔)
setup_logging()
logger = logging.getLogger(__name__)


def run_migrations():
    """Alembic 마이그레이션 실행"""
    alembic_cfg = AlembicConfig(str(settings.BASE_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(settings.BASE_DIR / "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
    # setup_logging() 설정 유지
    alembic_cfg.attributes["configure_logger"] = False
    alembic_command.upgrade(alembic_cfg, "head")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 실행"""
    logger.info("SchemaFlow 시작 (port: %d)", settings.api_port)

    if settings.run_migrations:
        try:
            run_migrations()
            logger.info("DB 마이그레이션 완료")
        except Exception as e:
            logger.error(f"DB 마이그레이션 실패: {e}", exc_info=True)
            raise

    yield

    logger.info("SchemaFlow 종료")


app = FastAPI(
    title="SchemaFlow",
    description="데이터베이스 스키마 변경 관리 - VCS(GitLab) 연동 GitOps 워크플로우",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """서비스 오류 → HTTP 상태 코드 변환"""
    if exc.status_code >= 500:
        logger.error(f"서비스 오류: {exc.message} ({request.url.path})")
    else:
        logger.warning(f"요청 오류 [{exc.code.value}]: {exc.message} ({request.url.path})")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code.value},
    )


# 라우터 등록
app.include_router(health.router, prefix="/api/v1")
app.include_router(projects.router, prefix="/api/v1")
app.include_router(vcs.router, prefix="/api/v1")
app.include_router(repositories.router, prefix="/api/v1")
app.include_router(plan.router, prefix="/api/v1")


@app.get("/")
def root():
    return {
        "service": "SchemaFlow",
        "version": APP_VERSION,
        "docs": "/docs",
    }
