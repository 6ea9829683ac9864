# scripts/analyze_description.py
import argparse
import json
import sys
from pathlib import Path

from aia_assess.dependencies import load_catalog
from aia_assess.engine.errors import AssessmentError
from aia_assess.engine.orchestrator import analyze
from aia_assess.schemas import AnalysisOut
from aia_assess.settings import get_settings


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Auto-answer the AIA questionnaire from a project description.")
    parser.add_argument("project_name")
    parser.add_argument("description_file", help="text file with the project description ('-' for stdin)")
    args = parser.parse_args(argv)

    if args.description_file == "-":
        description = sys.stdin.read()
    else:
        description = Path(args.description_file).read_text(encoding="utf-8")

    try:
        catalog = load_catalog(get_settings())
        result = analyze(args.project_name, description, catalog)
    except AssessmentError as e:
        print(f"{e.code}: {e.message}", file=sys.stderr)
        return 1

    out = AnalysisOut.from_result(result).model_dump(mode="json", by_alias=True, exclude_none=True)
    print(json.dumps(out, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
