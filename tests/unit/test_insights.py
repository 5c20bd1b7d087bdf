"""Tests for insight composition."""

from __future__ import annotations

import pytest

from youtube_insights.domain.analysis.insights import InsightComposer
from youtube_insights.domain.exceptions import EmptyVideoSetError
from youtube_insights.domain.models.video import VideoRecord


class TestInsightComposer:
    """Tests for InsightComposer."""

    @pytest.fixture
    def composer(self, fixed_clock) -> InsightComposer:
        """Create a composer with a frozen clock."""
        return InsightComposer(clock=fixed_clock)

    def test_empty_set_rejected(self, composer: InsightComposer) -> None:
        """Test composing over no videos raises."""
        with pytest.raises(EmptyVideoSetError):
            composer.compose([])

    def test_full_insight_set(
        self, composer: InsightComposer, sample_videos: list[VideoRecord]
    ) -> None:
        """Test every rule that holds for the sample channel contributes a line."""
        insights = composer.compose(sample_videos)

        assert insights.performance_patterns == (
            "Top videos average 750 views vs 650 channel average (+15%)",
            "Videos around 10 minutes tend to perform well for this channel",
        )
        assert insights.content_themes == (
            'Most successful content includes: "gadget", "review", "episode"',
            'High-performing keywords: "gadget", "review", "episode"',
        )
        assert insights.optimization_opportunities == (
            "3 recent videos underperformed - consider analyzing successful patterns",
        )
        assert insights.average_views == 650
        assert len(insights.top_videos) == 10
        assert insights.top_videos[0].views == 1200
        assert insights.patterns.review is True

    def test_lists_never_padded(self, composer: InsightComposer, make_video) -> None:
        """Test a set where no rule fires leaves every list empty."""
        insights = composer.compose([make_video("Hello", 100, minutes=0)])

        assert insights.performance_patterns == ()
        assert insights.content_themes == ()
        assert insights.optimization_opportunities == ()
        assert len(insights.top_videos) == 1

    def test_no_lift_statement_when_top_equals_average(
        self, composer: InsightComposer, make_video
    ) -> None:
        """Test small channels get no top-versus-average statement."""
        videos = [make_video("a", 100), make_video("b", 900)]

        insights = composer.compose(videos)

        assert not any(p.startswith("Top videos average") for p in insights.performance_patterns)

    def test_recent_upload_frequency(self, composer: InsightComposer, make_video) -> None:
        """Test three uploads inside the window produce a frequency line."""
        videos = [make_video(f"v{i}", 100, days_ago=i + 1) for i in range(3)]
        videos.append(make_video("old", 100, days_ago=90))

        insights = composer.compose(videos)

        assert "Recent upload frequency: 3 videos in the last 30 days" in insights.performance_patterns

    def test_two_recent_uploads_not_reported(self, composer: InsightComposer, make_video) -> None:
        """Test the frequency line needs at least three recent uploads."""
        videos = [make_video(f"v{i}", 100, days_ago=i + 1) for i in range(2)]

        insights = composer.compose(videos)

        assert not any(p.startswith("Recent upload") for p in insights.performance_patterns)

    def test_recent_window_is_configurable(self, fixed_clock, make_video) -> None:
        """Test the window length flows into the count and the message."""
        composer = InsightComposer(clock=fixed_clock, recent_window_days=7)
        videos = [make_video(f"v{i}", 100, days_ago=i + 1) for i in range(5)]

        insights = composer.compose(videos)

        assert "Recent upload frequency: 5 videos in the last 7 days" in insights.performance_patterns

    def test_standout_video(self, composer: InsightComposer, make_video) -> None:
        """Test a video far above average is called out with a truncated title."""
        title = "An Extremely Long Title About Building A Workshop From Scratch"
        videos = [make_video(title, 10000)] + [make_video(f"v{i}", 100) for i in range(9)]

        insights = composer.compose(videos)

        assert insights.optimization_opportunities[0] == (
            f"Consider replicating elements from your top video ({title[:50]}...)"
        )
        assert (
            "5 recent videos underperformed - consider analyzing successful patterns"
            in insights.optimization_opportunities
        )

    def test_no_underperformers_below_ten_videos(self, composer: InsightComposer, make_video) -> None:
        """Test the underperformer line needs at least ten videos."""
        videos = [make_video("Big hit", 100000)] + [make_video(f"v{i}", 10) for i in range(3)]

        insights = composer.compose(videos)

        assert not any("underperformed" in line for line in insights.optimization_opportunities)

    def test_underperformers_at_ten_videos(self, composer: InsightComposer, make_video) -> None:
        """Test exactly ten videos is enough for the underperformer line."""
        videos = [make_video(f"hit{i}", 1000) for i in range(6)] + [make_video(f"v{i}", 10) for i in range(4)]

        insights = composer.compose(videos)

        assert (
            "4 recent videos underperformed - consider analyzing successful patterns"
            in insights.optimization_opportunities
        )

    def test_tutorial_content(self, composer: InsightComposer, make_video) -> None:
        """Test a frequent "tutorial" keyword produces the tutorial hint."""
        videos = [
            make_video("Python tutorial basics", 100),
            make_video("Django tutorial advanced", 120),
        ]

        insights = composer.compose(videos)

        assert (
            "Tutorial content detected - ensure clear value proposition in titles"
            in insights.optimization_opportunities
        )

    def test_deterministic(self, composer: InsightComposer, sample_videos: list[VideoRecord]) -> None:
        """Test identical input and clock give identical insights."""
        assert composer.compose(sample_videos) == composer.compose(list(sample_videos))

    def test_top_videos_respects_configured_count(self, fixed_clock, sample_videos) -> None:
        """Test the number of ranked top videos is configurable."""
        insights = InsightComposer(clock=fixed_clock, top_videos_count=3).compose(sample_videos)

        assert [v.views for v in insights.top_videos] == [1200, 1100, 1000]
