"""Convert line-oriented layout files into minimal multi-page PDF documents.

The pipeline reads a ``.txt`` layout description, parses it into pages of
styled lines (:mod:`layout2pdf.layout`), positions every line and emits one
content stream per page (:mod:`layout2pdf.render.content`) and finally
serializes the PDF object graph with a cross-reference table
(:mod:`layout2pdf.render.assembler`).  The command line interface lives in
:mod:`layout2pdf.cli`.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
