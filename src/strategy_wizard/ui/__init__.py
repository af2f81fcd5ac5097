# -*- coding: utf-8 -*-
"""Front-end helpers for the strategy wizard.

`wizard_dialog` needs Tk and is imported lazily by the `gui` command.
"""
