"""File readers registered with :mod:`layout2pdf.io`."""
