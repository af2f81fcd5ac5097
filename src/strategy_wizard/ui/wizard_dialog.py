# -*- coding: utf-8 -*-
"""
wizard_dialog.py - Tk front end for the strategy wizard

Renders the orchestrator's current step:
- question steps as a radio list with Continue / Back
- the confirmation step with recommendation, alternatives and actions
- a "Skip the wizard" grid for direct strategy selection
"""

import logging
import tkinter as tk
from tkinter import messagebox, ttk
from typing import Callable, Optional

from ..catalog import STRATEGY_CATALOG
from ..models import StrategySelectionResult
from ..navigation import WizardStep
from ..orchestrator import BackNavigation, WizardOrchestrator
from .error_handler import ErrorHandler, handle_ui_error

logger = logging.getLogger("WizardDialog")

COLORS = {
    'bg_primary': '#0f172a',
    'bg_secondary': '#1e293b',
    'bg_tertiary': '#334155',
    'accent_blue': '#38bdf8',
    'accent_green': '#22c55e',
    'accent_red': '#ef4444',
    'accent_orange': '#f97316',
    'text_primary': '#f1f5f9',
    'text_secondary': '#cbd5e1',
}


class StrategyWizardDialog(tk.Toplevel):
    """Modal strategy wizard."""

    def __init__(self, parent,
                 callback: Optional[Callable[[StrategySelectionResult], None]] = None,
                 on_cancel: Optional[Callable[[], None]] = None,
                 back_navigation: str = BackNavigation.RECOMPUTE.value,
                 show_alternatives: bool = True):
        """
        Args:
            parent: Parent window
            callback: Callback(result) called when a strategy is committed
            on_cancel: Called when the operator abandons the wizard
        """
        super().__init__(parent)
        self.title("Choose Your Migration Strategy - HMS-Mirror")
        self.geometry("820x860")
        self.configure(bg=COLORS['bg_primary'])

        self.callback = callback
        self.cancel_callback = on_cancel
        self.error_handler = ErrorHandler(
            reporter=lambda title, message: messagebox.showerror(title, message, parent=self)
        )
        self.wizard = WizardOrchestrator(
            on_strategy_selected=self._on_selected,
            on_cancel=self._on_cancelled,
            back_navigation=back_navigation,
            show_alternatives=show_alternatives,
        )
        self.selector = None
        self.choice_var = tk.StringVar(value="")

        self._create_widgets()
        self._render()

        self.protocol("WM_DELETE_WINDOW", self._cancel)
        self.transient(parent)
        self.grab_set()

    # ---------------- layout ----------------

    def _create_widgets(self):
        tk.Label(
            self,
            text="Choose Your Migration Strategy",
            font=('Arial', 18, 'bold'),
            bg=COLORS['bg_primary'],
            fg=COLORS['text_primary']
        ).pack(anchor='w', padx=20, pady=(15, 0))

        tk.Label(
            self,
            text="Answer a few questions to get the best strategy for your needs",
            bg=COLORS['bg_primary'],
            fg=COLORS['text_secondary']
        ).pack(anchor='w', padx=20)

        self.breadcrumb_label = tk.Label(
            self,
            bg=COLORS['bg_secondary'],
            fg=COLORS['accent_blue'],
            anchor='w',
            padx=10,
            pady=4
        )
        self.breadcrumb_label.pack(fill='x', padx=20, pady=10)

        self.content = tk.Frame(self, bg=COLORS['bg_primary'])
        self.content.pack(fill='both', expand=True, padx=20)

        self.direct_frame = tk.LabelFrame(
            self,
            text="⚡ Skip the wizard - select a strategy directly",
            bg=COLORS['bg_primary'],
            fg=COLORS['accent_blue'],
            padx=10,
            pady=10
        )
        self.direct_frame.pack(fill='x', padx=20, pady=15)

        for index, strategy in enumerate(STRATEGY_CATALOG):
            info = STRATEGY_CATALOG[strategy]
            tk.Button(
                self.direct_frame,
                text=info.name,
                width=18,
                command=lambda s=strategy: self._select_directly(s),
                bg=COLORS['bg_tertiary'],
                fg=COLORS['text_primary']
            ).grid(row=index // 4, column=index % 4, padx=4, pady=4)

    def _clear_content(self):
        for widget in self.content.winfo_children():
            widget.destroy()

    def _label(self, text, font=('Arial', 10), fg=None, **pack):
        label = tk.Label(
            self.content,
            text=text,
            font=font,
            bg=COLORS['bg_primary'],
            fg=fg or COLORS['text_primary'],
            wraplength=740,
            justify='left'
        )
        label.pack(anchor='w', **pack)
        return label

    def _render(self):
        if self.wizard.closed:
            return
        self.breadcrumb_label.config(text=self.wizard.breadcrumb.render())
        self._clear_content()
        if self.wizard.step == WizardStep.CONFIRMATION:
            self._render_confirmation()
        else:
            self._render_selector()

    def _render_selector(self):
        self.selector = self.wizard.current_selector()
        selector = self.selector
        self.choice_var.set(selector.highlighted.value if selector.highlighted else "")

        self._label(selector.question, font=('Arial', 14, 'bold'), pady=(5, 0))
        self._label(selector.subtitle, fg=COLORS['text_secondary'], pady=(0, 10))

        for option in selector.options:
            suffix = "  (most common)" if option.is_common else ""
            ttk.Radiobutton(
                self.content,
                text=f"{option.icon} {option.label}{suffix}",
                value=option.value.value,
                variable=self.choice_var,
                command=self._on_highlight
            ).pack(anchor='w', pady=2)
            if option.description:
                self._label(f"      {option.description}", fg=COLORS['text_secondary'])

        self.detail_label = self._label("", fg=COLORS['text_secondary'], pady=(8, 0))
        self._show_option_details()

        btn_frame = tk.Frame(self.content, bg=COLORS['bg_primary'])
        btn_frame.pack(fill='x', pady=15)

        if selector.has_back:
            tk.Button(
                btn_frame,
                text="← Back",
                command=self._back,
                bg=COLORS['bg_tertiary'],
                fg=COLORS['text_primary']
            ).pack(side='left')

        self.continue_btn = tk.Button(
            btn_frame,
            text="Continue",
            command=self._continue,
            bg=COLORS['accent_blue'],
            fg='#000000',
            state='normal' if selector.can_continue else 'disabled'
        )
        self.continue_btn.pack(side='right')

        if selector.help_text:
            self._label(f"💡 Need help choosing?\n{selector.help_text}", fg=COLORS['text_secondary'])

    def _show_option_details(self):
        if self.selector.highlighted is None:
            self.detail_label.config(text="")
            return
        option = self.selector.option_for(self.selector.highlighted)
        lines = [option.details] if option.details else []
        lines.extend(f"• {example}" for example in option.examples)
        if option.warning:
            lines.append(f"⚠️ {option.warning}")
        self.detail_label.config(text="\n".join(lines))

    def _render_confirmation(self):
        view = self.wizard.confirmation_view()
        text = tk.Text(
            self.content,
            height=24,
            wrap='word',
            bg=COLORS['bg_secondary'],
            fg=COLORS['text_primary']
        )
        text.insert('1.0', view.render_text())
        text.config(state='disabled')
        text.pack(fill='both', expand=True)

        btn_frame = tk.Frame(self.content, bg=COLORS['bg_primary'])
        btn_frame.pack(fill='x', pady=15)

        tk.Button(
            btn_frame,
            text=view.back_label,
            command=self._back,
            bg=COLORS['bg_tertiary'],
            fg=COLORS['text_primary']
        ).pack(side='left')

        tk.Button(
            btn_frame,
            text="Cancel",
            command=self._cancel,
            bg=COLORS['bg_tertiary'],
            fg=COLORS['accent_red']
        ).pack(side='left', padx=10)

        if view.is_available:
            tk.Button(
                btn_frame,
                text=view.confirm_label,
                command=self._confirm,
                bg=COLORS['accent_green'],
                fg='#000000',
                font=('Arial', 11, 'bold')
            ).pack(side='right')

    # ---------------- actions ----------------

    def _on_highlight(self):
        self.selector.highlight(self.choice_var.get())
        self.continue_btn.config(state='normal')
        self._show_option_details()

    @handle_ui_error("Failed to record answer")
    def _continue(self):
        self.selector.commit()
        self._render()

    @handle_ui_error("Failed to go back")
    def _back(self):
        self.wizard.back()
        self._render()

    @handle_ui_error("Failed to confirm strategy")
    def _confirm(self):
        self.wizard.confirm()

    @handle_ui_error("Failed to select strategy")
    def _select_directly(self, strategy):
        self.wizard.select_directly(strategy)

    def _cancel(self):
        if not self.wizard.closed:
            self.wizard.cancel()
        else:
            self.destroy()

    def _on_selected(self, result: StrategySelectionResult):
        if self.callback:
            self.callback(result)
        self.destroy()

    def _on_cancelled(self):
        if self.cancel_callback:
            self.cancel_callback()
        self.destroy()


def run_dialog(back_navigation: str = BackNavigation.RECOMPUTE.value,
               show_alternatives: bool = True) -> Optional[StrategySelectionResult]:
    """Open the dialog on a hidden root window and block until it closes."""

    outcome = {}

    root = tk.Tk()
    root.withdraw()

    dialog = StrategyWizardDialog(
        root,
        callback=lambda result: outcome.setdefault('result', result),
        back_navigation=back_navigation,
        show_alternatives=show_alternatives,
    )
    root.wait_window(dialog)
    root.destroy()
    return outcome.get('result')
