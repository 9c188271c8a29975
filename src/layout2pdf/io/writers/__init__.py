"""File writers registered with :mod:`layout2pdf.io`."""
