"""Material Design icons via QtAwesome."""
import qtawesome as qta
from marks_transcriber.gui.styles.theme import Colors

class MaterialIcons:
    """Centralized Material Design icon definitions using QtAwesome."""

    @staticmethod
    def check(color=None):
        """Done/confirm icon."""
        return qta.icon('mdi6.check', color=color or Colors.TEXT_ON_PRIMARY)

    @staticmethod
    def delete():
        """Clear/delete icon."""
        return qta.icon('mdi6.delete-outline', color=Colors.ERROR)

    @staticmethod
    def content_copy():
        """Copy icon."""
        return qta.icon('mdi6.content-copy', color=Colors.TEXT_SECONDARY)

    @staticmethod
    def content_save():
        """Save icon."""
        return qta.icon('mdi6.content-save-outline', color=Colors.TEXT_SECONDARY)
