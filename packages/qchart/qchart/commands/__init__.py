"""qchart: commands subpackage
---------------------------------------------------------
Implementation of the commands exposed by the ``qchart`` tool.

Public API
----------
``layout`` : Layout commands (``qchart validate``, ``qchart inspect``)
"""
