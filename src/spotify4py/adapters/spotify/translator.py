"""Translate Spotify wire payloads into domain records.

Every function here is pure and order preserving. The only partial step is the
copyright code lookup, which raises ``UnrecognizedValueError`` on unknown codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spotify4py.domain.model import (
    AccessCredential,
    Album,
    AnalysisTrack,
    Artist,
    AudioAnalysis,
    AudioFeatures,
    Category,
    Copyright,
    CopyrightType,
    Cursor,
    CursorPaging,
    Episode,
    FeaturedPlaylists,
    Followers,
    Image,
    LinkedTrack,
    Modality,
    Paging,
    Playlist,
    PlaylistTracksRef,
    RecommendationSeed,
    Recommendations,
    Restrictions,
    ResumePoint,
    SavedAlbum,
    SavedShow,
    SavedTrack,
    Section,
    Segment,
    Show,
    TimeInterval,
    Track,
    User,
    frozen_mapping,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import datetime

    from .schema import (
        FeaturedPlaylistsEnvelope,
        SavedAlbumItem,
        SavedShowItem,
        SavedTrackItem,
        SpotifyAlbum,
        SpotifyAnalysisTrack,
        SpotifyArtist,
        SpotifyAudioAnalysis,
        SpotifyAudioFeatures,
        SpotifyCategory,
        SpotifyCopyright,
        SpotifyCursorPage,
        SpotifyEpisode,
        SpotifyFollowers,
        SpotifyImage,
        SpotifyLinkedTrack,
        SpotifyPage,
        SpotifyPlaylist,
        SpotifyRecommendationSeed,
        SpotifyRecommendations,
        SpotifyRestrictions,
        SpotifySection,
        SpotifySegment,
        SpotifyShow,
        SpotifyTimeInterval,
        SpotifyTrack,
        SpotifyUser,
        TokenResponse,
    )


def translate_page[W, D](page: SpotifyPage[W], translate: Callable[[W], D]) -> Paging[D]:
    """Map the items of a page, keeping its navigation metadata unchanged."""

    return Paging(
        items=tuple(page.items),
        limit=page.limit,
        offset=page.offset,
        total=page.total,
        href=page.href,
        next=page.next,
        previous=page.previous,
    ).map_items(translate)


def translate_cursor_page[W, D](
    page: SpotifyCursorPage[W], translate: Callable[[W], D]
) -> CursorPaging[D]:
    cursors = page.cursors
    return CursorPaging(
        items=tuple(page.items),
        limit=page.limit,
        cursors=Cursor(after=cursors.after, before=cursors.before) if cursors else Cursor(),
        total=page.total,
        href=page.href,
        next=page.next,
    ).map_items(translate)


def translate_optional_items[W, D](
    items: Sequence[W | None], translate: Callable[[W], D]
) -> list[D | None]:
    """Map a batch lookup, keeping ``None`` where an id was not found."""

    return [translate(item) if item is not None else None for item in items]


def translate_copyright(copyright_: SpotifyCopyright) -> Copyright:
    return Copyright(text=copyright_.text, copyright_type=CopyrightType.from_code(copyright_.type))


def translate_image(image: SpotifyImage) -> Image:
    return Image(url=image.url, height=image.height, width=image.width)


def translate_artist(artist: SpotifyArtist) -> Artist:
    return Artist(
        id=artist.id,
        name=artist.name,
        uri=artist.uri,
        href=artist.href,
        external_urls=frozen_mapping(artist.external_urls),
        genres=tuple(artist.genres),
        images=_images(artist.images),
        popularity=artist.popularity,
        followers=_followers(artist.followers),
    )


def translate_album(album: SpotifyAlbum) -> Album:
    return Album(
        id=album.id,
        name=album.name,
        album_type=album.album_type,
        album_group=album.album_group,
        artists=tuple(translate_artist(artist) for artist in album.artists),
        available_markets=tuple(album.available_markets),
        copyrights=tuple(translate_copyright(item) for item in album.copyrights),
        external_ids=frozen_mapping(album.external_ids),
        external_urls=frozen_mapping(album.external_urls),
        genres=tuple(album.genres),
        href=album.href,
        images=_images(album.images),
        label=album.label,
        popularity=album.popularity,
        release_date=album.release_date,
        release_date_precision=album.release_date_precision,
        restrictions=_restrictions(album.restrictions),
        total_tracks=album.total_tracks,
        tracks=translate_page(album.tracks, translate_track) if album.tracks else None,
        uri=album.uri,
    )


def translate_track(track: SpotifyTrack) -> Track:
    return Track(
        id=track.id,
        name=track.name,
        album=translate_album(track.album) if track.album else None,
        artists=tuple(translate_artist(artist) for artist in track.artists),
        available_markets=tuple(track.available_markets),
        disc_number=track.disc_number,
        duration_ms=track.duration_ms,
        explicit=track.explicit,
        external_ids=frozen_mapping(track.external_ids),
        external_urls=frozen_mapping(track.external_urls),
        href=track.href,
        is_local=track.is_local,
        is_playable=track.is_playable,
        linked_from=_linked_track(track.linked_from),
        popularity=track.popularity,
        preview_url=track.preview_url,
        restrictions=_restrictions(track.restrictions),
        track_number=track.track_number,
        uri=track.uri,
    )


def translate_show(show: SpotifyShow) -> Show:
    return Show(
        id=show.id,
        name=show.name,
        available_markets=tuple(show.available_markets),
        copyrights=tuple(translate_copyright(item) for item in show.copyrights),
        description=show.description,
        html_description=show.html_description,
        explicit=show.explicit,
        external_urls=frozen_mapping(show.external_urls),
        href=show.href,
        images=_images(show.images),
        is_externally_hosted=show.is_externally_hosted,
        languages=tuple(show.languages),
        media_type=show.media_type,
        publisher=show.publisher,
        total_episodes=show.total_episodes,
        episodes=translate_page(show.episodes, translate_episode) if show.episodes else None,
        uri=show.uri,
    )


def translate_episode(episode: SpotifyEpisode) -> Episode:
    resume_point = episode.resume_point
    return Episode(
        id=episode.id,
        name=episode.name,
        audio_preview_url=episode.audio_preview_url,
        description=episode.description,
        html_description=episode.html_description,
        duration_ms=episode.duration_ms,
        explicit=episode.explicit,
        external_urls=frozen_mapping(episode.external_urls),
        href=episode.href,
        images=_images(episode.images),
        is_externally_hosted=episode.is_externally_hosted,
        is_playable=episode.is_playable,
        languages=tuple(episode.languages),
        release_date=episode.release_date,
        release_date_precision=episode.release_date_precision,
        resume_point=(
            ResumePoint(
                fully_played=resume_point.fully_played,
                resume_position_ms=resume_point.resume_position_ms,
            )
            if resume_point
            else None
        ),
        show=translate_show(episode.show) if episode.show else None,
        uri=episode.uri,
    )


def translate_category(category: SpotifyCategory) -> Category:
    return Category(
        id=category.id,
        name=category.name,
        href=category.href,
        icons=_images(category.icons),
    )


def translate_user(user: SpotifyUser) -> User:
    return User(
        id=user.id,
        display_name=user.display_name,
        country=user.country,
        email=user.email,
        external_urls=frozen_mapping(user.external_urls),
        followers=_followers(user.followers),
        href=user.href,
        images=_images(user.images),
        product=user.product,
        uri=user.uri,
    )


def translate_playlist(playlist: SpotifyPlaylist) -> Playlist:
    tracks = playlist.tracks
    return Playlist(
        id=playlist.id,
        name=playlist.name,
        owner=translate_user(playlist.owner),
        collaborative=playlist.collaborative,
        description=playlist.description,
        external_urls=frozen_mapping(playlist.external_urls),
        href=playlist.href,
        images=_images(playlist.images),
        public=playlist.public,
        snapshot_id=playlist.snapshot_id,
        tracks=PlaylistTracksRef(total=tracks.total, href=tracks.href) if tracks else None,
        uri=playlist.uri,
    )


def translate_featured_playlists(envelope: FeaturedPlaylistsEnvelope) -> FeaturedPlaylists:
    return FeaturedPlaylists(
        message=envelope.message,
        playlists=translate_page(envelope.playlists, translate_playlist),
    )


def translate_saved_album(item: SavedAlbumItem) -> SavedAlbum:
    return SavedAlbum(added_at=item.added_at, album=translate_album(item.album))


def translate_saved_show(item: SavedShowItem) -> SavedShow:
    return SavedShow(added_at=item.added_at, show=translate_show(item.show))


def translate_saved_track(item: SavedTrackItem) -> SavedTrack:
    return SavedTrack(added_at=item.added_at, track=translate_track(item.track))


def translate_audio_features(features: SpotifyAudioFeatures) -> AudioFeatures:
    return AudioFeatures(
        id=features.id,
        acousticness=features.acousticness,
        danceability=features.danceability,
        duration_ms=features.duration_ms,
        energy=features.energy,
        instrumentalness=features.instrumentalness,
        key=features.key,
        liveness=features.liveness,
        loudness=features.loudness,
        mode=features.mode,
        speechiness=features.speechiness,
        tempo=features.tempo,
        time_signature=features.time_signature,
        valence=features.valence,
        analysis_url=features.analysis_url,
        track_href=features.track_href,
        uri=features.uri,
    )


def translate_audio_analysis(analysis: SpotifyAudioAnalysis) -> AudioAnalysis:
    return AudioAnalysis(
        track=_analysis_track(analysis.track),
        bars=tuple(_time_interval(item) for item in analysis.bars),
        beats=tuple(_time_interval(item) for item in analysis.beats),
        sections=tuple(_section(item) for item in analysis.sections),
        segments=tuple(_segment(item) for item in analysis.segments),
        tatums=tuple(_time_interval(item) for item in analysis.tatums),
    )


def translate_recommendation_seed(seed: SpotifyRecommendationSeed) -> RecommendationSeed:
    return RecommendationSeed(
        id=seed.id,
        type=seed.type,
        after_filtering_size=seed.after_filtering_size,
        after_relinking_size=seed.after_relinking_size,
        initial_pool_size=seed.initial_pool_size,
        href=seed.href,
    )


def translate_recommendations(recommendations: SpotifyRecommendations) -> Recommendations:
    return Recommendations(
        seeds=tuple(translate_recommendation_seed(seed) for seed in recommendations.seeds),
        tracks=tuple(translate_track(track) for track in recommendations.tracks),
    )


def translate_token(
    token: TokenResponse,
    *,
    issued_at: datetime,
    previous_refresh_token: str | None = None,
) -> AccessCredential:
    """Build a credential; a refresh response without a new refresh token keeps the old one."""

    return AccessCredential(
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
        refresh_token=token.refresh_token or previous_refresh_token,
        scope=tuple(token.scope.split()) if token.scope else (),
        issued_at=issued_at,
    )


def _images(images: Sequence[SpotifyImage]) -> tuple[Image, ...]:
    return tuple(translate_image(image) for image in images)


def _followers(followers: SpotifyFollowers | None) -> Followers | None:
    if followers is None:
        return None
    return Followers(total=followers.total, href=followers.href)


def _restrictions(restrictions: SpotifyRestrictions | None) -> Restrictions | None:
    if restrictions is None:
        return None
    return Restrictions(reason=restrictions.reason)


def _linked_track(linked: SpotifyLinkedTrack | None) -> LinkedTrack | None:
    if linked is None:
        return None
    return LinkedTrack(
        id=linked.id,
        uri=linked.uri,
        href=linked.href,
        external_urls=frozen_mapping(linked.external_urls),
    )


def _modality(value: int) -> Modality | None:
    if value in (Modality.MINOR, Modality.MAJOR):
        return Modality(value)
    return None


def _time_interval(interval: SpotifyTimeInterval) -> TimeInterval:
    return TimeInterval(
        start=interval.start,
        duration=interval.duration,
        confidence=interval.confidence,
    )


def _section(section: SpotifySection) -> Section:
    return Section(
        start=section.start,
        duration=section.duration,
        confidence=section.confidence,
        loudness=section.loudness,
        tempo=section.tempo,
        tempo_confidence=section.tempo_confidence,
        key=section.key,
        key_confidence=section.key_confidence,
        mode=_modality(section.mode),
        mode_confidence=section.mode_confidence,
        time_signature=section.time_signature,
        time_signature_confidence=section.time_signature_confidence,
    )


def _segment(segment: SpotifySegment) -> Segment:
    return Segment(
        start=segment.start,
        duration=segment.duration,
        confidence=segment.confidence,
        loudness_start=segment.loudness_start,
        loudness_max=segment.loudness_max,
        loudness_max_time=segment.loudness_max_time,
        loudness_end=segment.loudness_end,
        pitches=tuple(segment.pitches),
        timbre=tuple(segment.timbre),
    )


def _analysis_track(track: SpotifyAnalysisTrack) -> AnalysisTrack:
    return AnalysisTrack(
        duration=track.duration,
        loudness=track.loudness,
        tempo=track.tempo,
        tempo_confidence=track.tempo_confidence,
        time_signature=track.time_signature,
        time_signature_confidence=track.time_signature_confidence,
        key=track.key,
        key_confidence=track.key_confidence,
        mode=_modality(track.mode),
        mode_confidence=track.mode_confidence,
        num_samples=track.num_samples,
        end_of_fade_in=track.end_of_fade_in,
        start_of_fade_out=track.start_of_fade_out,
    )
