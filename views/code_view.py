"""
Code View.

Read-only text pane with line numbers and syntax highlighting that shows
the code generated for the current path.
"""

from PyQt6.QtCore import Qt, QRegularExpression, QSize
from PyQt6.QtGui import (
    QFont, QColor, QPainter, QTextCharFormat, QSyntaxHighlighter, QTextDocument
)
from PyQt6.QtWidgets import QPlainTextEdit, QWidget


class PathCodeHighlighter(QSyntaxHighlighter):
    """Syntax highlighter for generated path code (SwiftUI or PyQt)."""

    def __init__(self, document: QTextDocument):
        super().__init__(document)
        self._highlighting_rules = []

        # Path builder types
        type_format = QTextCharFormat()
        type_format.setForeground(QColor("#0550AE"))  # Blue
        type_format.setFontWeight(QFont.Weight.Bold)
        for word in ["Path", "CGPoint", "QPainterPath", "QPointF"]:
            pattern = QRegularExpression(rf"\b{word}\b")
            self._highlighting_rules.append((pattern, type_format))

        # Path commands
        command_format = QTextCharFormat()
        command_format.setForeground(QColor("#8250DF"))  # Purple
        commands = [
            "move", "addLine", "addQuadCurve", "addCurve",
            "moveTo", "lineTo", "quadTo", "cubicTo",
        ]
        for word in commands:
            pattern = QRegularExpression(rf"\b{word}\b")
            self._highlighting_rules.append((pattern, command_format))

        # Argument labels
        label_format = QTextCharFormat()
        label_format.setForeground(QColor("#953800"))  # Orange
        pattern = QRegularExpression(r"\b(to|control|control1|control2|x|y)(?=:)")
        self._highlighting_rules.append((pattern, label_format))

        # Keywords
        keyword_format = QTextCharFormat()
        keyword_format.setForeground(QColor("#CF222E"))  # Red
        keyword_format.setFontWeight(QFont.Weight.Bold)
        pattern = QRegularExpression(r"\bin\b")
        self._highlighting_rules.append((pattern, keyword_format))

        # Numbers
        number_format = QTextCharFormat()
        number_format.setForeground(QColor("#0A3069"))  # Dark blue
        pattern = QRegularExpression(r"-?\b[0-9]+\.?[0-9]*\b")
        self._highlighting_rules.append((pattern, number_format))

    def highlightBlock(self, text: str):
        """Apply syntax highlighting to a block of text."""
        for pattern, fmt in self._highlighting_rules:
            match_iterator = pattern.globalMatch(text)
            while match_iterator.hasNext():
                match = match_iterator.next()
                self.setFormat(match.capturedStart(), match.capturedLength(), fmt)


class CodeView(QPlainTextEdit):
    """
    Read-only code pane with line numbers and highlighting.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)

        font = QFont("Monospace", 11)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.setFont(font)
        self.setTabStopDistance(self.fontMetrics().horizontalAdvance(' ') * 4)

        # Line number area
        self._line_number_area = LineNumberArea(self)

        # Syntax highlighting
        self._highlighter = PathCodeHighlighter(self.document())

        self.setStyleSheet("""
            QPlainTextEdit {
                background: #FFFFFF;
                color: #24292F;
                border: 1px solid #D0D7DE;
                padding: 8px;
                selection-background-color: #0969DA;
                selection-color: white;
            }
        """)

        self.blockCountChanged.connect(self._update_line_number_area_width)
        self.updateRequest.connect(self._update_line_number_area)

        self._update_line_number_area_width(0)

    def set_code(self, code: str):
        """Replace the displayed code, keeping the scroll position."""
        if code == self.toPlainText():
            return
        scroll = self.verticalScrollBar().value()
        self.setPlainText(code)
        self.verticalScrollBar().setValue(scroll)

    def line_number_area_width(self) -> int:
        """Calculate width needed for line numbers."""
        digits = len(str(max(1, self.blockCount())))
        return 10 + self.fontMetrics().horizontalAdvance('9') * digits

    def _update_line_number_area_width(self, _):
        """Update the margin to accommodate line numbers."""
        self.setViewportMargins(self.line_number_area_width(), 0, 0, 0)

    def _update_line_number_area(self, rect, dy):
        """Update line number area on scroll."""
        if dy:
            self._line_number_area.scroll(0, dy)
        else:
            self._line_number_area.update(0, rect.y(),
                                          self._line_number_area.width(), rect.height())

        if rect.contains(self.viewport().rect()):
            self._update_line_number_area_width(0)

    def resizeEvent(self, event):
        """Handle resize to update line number area."""
        super().resizeEvent(event)
        cr = self.contentsRect()
        self._line_number_area.setGeometry(
            cr.left(), cr.top(),
            self.line_number_area_width(), cr.height()
        )

    def line_number_area_paint_event(self, event):
        """Paint the line numbers."""
        painter = QPainter(self._line_number_area)
        painter.fillRect(event.rect(), QColor("#F6F8FA"))

        block = self.firstVisibleBlock()
        block_number = block.blockNumber()
        top = round(self.blockBoundingGeometry(block).translated(
            self.contentOffset()).top())
        bottom = top + round(self.blockBoundingRect(block).height())

        while block.isValid() and top <= event.rect().bottom():
            if block.isVisible() and bottom >= event.rect().top():
                painter.setPen(QColor("#8C959F"))
                painter.drawText(
                    0, top,
                    self._line_number_area.width() - 5,
                    self.fontMetrics().height(),
                    Qt.AlignmentFlag.AlignRight, str(block_number + 1)
                )

            block = block.next()
            top = bottom
            bottom = top + round(self.blockBoundingRect(block).height())
            block_number += 1

        painter.end()


class LineNumberArea(QWidget):
    """Widget displaying line numbers for CodeView."""

    def __init__(self, editor: CodeView):
        super().__init__(editor)
        self._editor = editor

    def sizeHint(self):
        return QSize(self._editor.line_number_area_width(), 0)

    def paintEvent(self, event):
        self._editor.line_number_area_paint_event(event)
