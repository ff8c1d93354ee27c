from __future__ import annotations

import io
from datetime import datetime, timezone
from typing import Literal, Optional
from uuid import UUID

import pandas as pd
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse

from sprocket_api.core.deps import get_team_service
from sprocket_api.services.teams import TeamService

router = APIRouter(prefix="/reports", tags=["Reports"])

ROSTER_COLUMNS = ["team", "sport", "age_group", "player", "position", "birthdate"]


def _export_dataframe(
    df: pd.DataFrame,
    filename_base: str,
    export_format: str,
) -> StreamingResponse:
    """
    Convert DataFrame to the requested format and return a StreamingResponse.

    Supported formats:
      - csv: text/csv
      - xlsx: application/vnd.openxmlformats-officedocument.spreadsheetml.sheet
      - pdf: application/pdf (simple tabular rendering)
    """
    if export_format == "xlsx":
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Roster")
        buffer.seek(0)
        headers = {"Content-Disposition": f'attachment; filename="{filename_base}.xlsx"'}
        return StreamingResponse(
            buffer,
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers=headers,
        )

    if export_format == "pdf":
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import landscape, letter
        from reportlab.lib.styles import getSampleStyleSheet
        from reportlab.platypus import Paragraph, SimpleDocTemplate, Table, TableStyle

        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer, pagesize=landscape(letter), leftMargin=18, rightMargin=18, topMargin=18, bottomMargin=18
        )
        styles = getSampleStyleSheet()
        stamp = datetime.now(tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        elements: list = [Paragraph(f"Team Roster ({stamp})", styles["Title"])]

        data = [list(df.columns)] + df.fillna("").astype(str).values.tolist()
        table = Table(data, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ]
            )
        )
        elements.append(table)
        doc.build(elements)
        buffer.seek(0)
        headers = {"Content-Disposition": f'attachment; filename="{filename_base}.pdf"'}
        return StreamingResponse(buffer, media_type="application/pdf", headers=headers)

    # csv
    text_buffer = io.StringIO()
    df.to_csv(text_buffer, index=False)
    text_buffer.seek(0)
    headers = {"Content-Disposition": f'attachment; filename="{filename_base}.csv"'}
    return StreamingResponse(text_buffer, media_type="text/csv", headers=headers)


# PUBLIC_INTERFACE
@router.get(
    "/roster",
    summary="Team roster report",
    description="Export one row per player with team details, for all teams or a single team.",
    response_description="File stream (CSV/XLSX/PDF)",
)
async def roster_report(
    service: TeamService = Depends(get_team_service),
    team_id: Optional[UUID] = Query(None, description="Limit the report to one team"),
    format: Literal["csv", "xlsx", "pdf"] = Query("csv", description="Export format: csv | xlsx | pdf"),
):
    rows = await service.roster_rows(team_id)
    if rows is None:
        raise HTTPException(status_code=404, detail="Team not found")
    df = pd.DataFrame([r.model_dump() for r in rows], columns=ROSTER_COLUMNS)
    return _export_dataframe(df, "team_roster", format)
