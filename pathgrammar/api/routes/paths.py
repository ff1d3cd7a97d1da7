from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from pathgrammar.api.schemas.paths import (
    FullPathResponse,
    PathRequest,
    RootAnalysisResponse,
    SearchPatternRequest,
    SearchPatternResponse,
    SplitResponse,
)
from pathgrammar.core.config import get_settings
from pathgrammar.syntax import PathSyntaxError
from pathgrammar.syntax.service import PathSyntaxService, root_analysis_to_dict

router = APIRouter(prefix="/paths", tags=["paths"])


def get_path_syntax_service() -> PathSyntaxService:
    return PathSyntaxService(settings=get_settings())


@router.post("/root", response_model=RootAnalysisResponse)
def analyze_root(
    request: PathRequest,
    service: PathSyntaxService = Depends(get_path_syntax_service),
) -> RootAnalysisResponse:
    try:
        analysis = service.analyze(request.path)
    except PathSyntaxError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return RootAnalysisResponse.model_validate(root_analysis_to_dict(analysis))


@router.post("/split", response_model=SplitResponse)
def split_path(
    request: PathRequest,
    service: PathSyntaxService = Depends(get_path_syntax_service),
) -> SplitResponse:
    try:
        split, directory_name = service.split(request.path)
    except PathSyntaxError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return SplitResponse(
        path=request.path,
        directory=split.directory,
        file=split.file,
        directory_name=directory_name,
    )


@router.post("/search-pattern", response_model=SearchPatternResponse)
def validate_search_pattern(
    request: SearchPatternRequest,
    service: PathSyntaxService = Depends(get_path_syntax_service),
) -> SearchPatternResponse:
    try:
        service.validate_search_pattern(request.pattern)
    except PathSyntaxError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return SearchPatternResponse(pattern=request.pattern, valid=True)


@router.post("/full", response_model=FullPathResponse)
def resolve_full_path(
    request: PathRequest,
    service: PathSyntaxService = Depends(get_path_syntax_service),
) -> FullPathResponse:
    try:
        result = service.full_path(request.path)
    except PathSyntaxError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return FullPathResponse(path=result.path, trimmed=result.trimmed, full_path=result.full_path)
