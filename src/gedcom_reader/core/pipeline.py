from __future__ import annotations

from gedcom_reader.core.context import ParseContext
from gedcom_reader.core.exceptions import ParseExecutionError
from gedcom_reader.exporter import export_result_set_json
from gedcom_reader.parser_core import GEDCOMReader
from gedcom_reader.records.models import ResultSet


class Pipeline:
    """
    Read -> process -> export.
    No parsing logic lives here.
    """

    def __init__(self, context: ParseContext, reader: GEDCOMReader | None = None):
        self.ctx = context
        self.log = context.logger
        self.reader = reader if reader is not None else GEDCOMReader(config=context.config)

    def run(self) -> ResultSet:
        self.log.info("Pipeline starting")

        try:
            result = self.reader.run(self.ctx.input_path)
            self.ctx.stats.update(result.counts())
            if self.reader.source is not None:
                self.ctx.stats["encoding"] = self.reader.source.encoding

            if self.ctx.output_path:
                export_result_set_json(result, self.ctx.output_path)

            self.log.info("Pipeline completed successfully")
            return result

        except Exception as exc:
            self.ctx.errors.append(str(exc))
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc
