import pytest

from react_test_generator.analysis.export_classifier import ExportClassifier
from react_test_generator.models.data_models import (
    ComponentIdentity,
    ExportClassification,
    ExportStyle,
    Outcome,
)


@pytest.fixture
def classifier():
    return ExportClassifier()


class TestExportClassifier:
    """Test ExportClassifier.classify method."""

    @pytest.mark.parametrize("source", [
        "export default function Card() {\n  return null\n}\n",
        "export default async function Card() {}\n",
        "export default class Card extends React.Component {}\n",
        "const Card = () => null\n\nexport default Card\n",
        "function Card() {}\nexport { Card as default }\n",
    ])
    def test_default_exports(self, classifier, source):
        """Test the recognised default-export forms."""
        result = classifier.classify(source, "Card")

        assert result == ExportClassification(ExportStyle.DEFAULT, Outcome.MATCHED)

    @pytest.mark.parametrize("source", [
        "export const Card = () => null\n",
        "export let Card = () => null\n",
        "export function Card() {}\n",
        "export async function Card() {}\n",
        "export class Card extends React.Component {}\n",
        "function Card() {}\nexport { Card }\n",
        "function Card() {}\nexport {\n  Header,\n  Card,\n}\n",
    ])
    def test_named_exports(self, classifier, source):
        """Test the recognised named-export forms."""
        result = classifier.classify(source, "Card")

        assert result == ExportClassification(ExportStyle.NAMED, Outcome.MATCHED)

    def test_default_wins_over_named(self, classifier):
        """Test a module exporting both ways is classified as default."""
        # Arrange
        source = "export const Card = () => null\nexport default Card\n"

        # Act
        result = classifier.classify(source, "Card")

        # Assert
        assert result.style is ExportStyle.DEFAULT
        assert result.outcome is Outcome.MATCHED

    @pytest.mark.parametrize("source", [
        "export const CardList = () => null\n",
        "export default CardList\n",
        "export { CardList }\n",
        "const Card = () => null\nmodule.exports = Card\n",
    ])
    def test_prefix_matches_do_not_count(self, classifier, source):
        """Test a longer identifier sharing the prefix is not a match."""
        result = classifier.classify(source, "Card")

        assert result.style is ExportStyle.DEFAULT
        assert result.is_fallback

    def test_unreadable_source_falls_back(self, classifier):
        """Test missing text gives a default-export fallback."""
        result = classifier.classify(None, "Card")

        assert result == ExportClassification(ExportStyle.DEFAULT, Outcome.FALLBACK)

    def test_accepts_component_identity(self, classifier):
        """Test classify takes a ComponentIdentity as well as a string."""
        identity = ComponentIdentity("DashboardPage", is_route_file=True)
        source = "export default function DashboardPage() {}\n"

        result = classifier.classify(source, identity)

        assert result.style is ExportStyle.DEFAULT
        assert not result.is_fallback

    def test_name_with_dollar_sign(self, classifier):
        """Test identifiers with regex metacharacters are matched literally."""
        result = classifier.classify("export const $Card = 1\n", "$Card")

        assert result.style is ExportStyle.NAMED
