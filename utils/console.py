"""
Console Formatting
Turns Form Recognizer results into the sample client's console transcript
"""

from datetime import datetime
from typing import List, Optional

from models import AnalyzeResult, KeysResult, ModelResult, ModelsResult


def format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M:%S")


def format_model_status(model: ModelResult) -> str:
    """Multi-line status block shown after training"""
    lines = [
        "Model :",
        f"\tModel id: {model.model_id}",
        f"\tStatus:  {model.status}",
        f"\tCreated: {format_timestamp(model.created_date_time)}",
        f"\tUpdated: {format_timestamp(model.last_updated_date_time)}",
    ]
    return "\n".join(lines)


def format_extracted_keys(keys: KeysResult) -> str:
    lines = []
    for cluster, cluster_keys in keys.clusters.items():
        lines.append(f"  Cluster: {cluster}")
        for key in cluster_keys:
            lines.append(f"\t{key}")
    return "\n".join(lines)


def format_analyze_result(result: AnalyzeResult) -> str:
    """
    Page by page: page number, cluster, one line per key/value pair,
    then each table with one tab-separated line per column
    """
    lines: List[str] = []
    for page in result.pages:
        lines.append(f"\tPage#: {page.number}")
        lines.append(f"\tCluster Id: {'' if page.cluster_id is None else page.cluster_id}")

        for pair in page.key_value_pairs:
            line = ""
            if pair.key:
                line += pair.key_text()
            if pair.value:
                line += " - " + pair.value_text()
            lines.append(line)
        lines.append("")

        for table in page.tables:
            lines.append(f"Table id: {table.id}")
            for column in table.columns:
                cells = [token.text for token in column.header]
                for entry in column.entries:
                    cells.extend(token.text for token in entry)
                lines.append("".join(f"{cell}\t" for cell in cells))
            lines.append("")

    return "\n".join(lines)


def format_model_list(models: ModelsResult) -> str:
    return "\n".join(
        f"{model.model_id} {model.status} "
        f"{format_timestamp(model.created_date_time)} {format_timestamp(model.last_updated_date_time)}"
        for model in models.models
    )
