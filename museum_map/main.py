import streamlit as st
import pandas as pd
import pydeck as pdk
import uuid

# Tour core and its external collaborators
from museum_map.config.settings import get_settings
from museum_map.models import Point, SegmentStatus, TourState
from museum_map.tour.builder import TourBuilder
from museum_map.tour.planner import plan_walking_tour
from museum_map.tour.resolver import RouteResolver
from museum_map.utils.directions import OsrmWalkingProvider
from museum_map.utils.geocoding import locate_exhibit
from museum_map.utils.maps import generate_walking_directions_url
from museum_map.utils.transport import estimate_walk

settings = get_settings()

# --- PAGE CONFIG ---
st.set_page_config(page_title="Museum Walking Tour", page_icon="🏛️", layout="centered")

# --- SESSION STATE ---
# One builder and one resolver per visitor session; nothing is persisted.
# Streamlit has no session-end hook, so each resolver's worker threads stay
# idle until the server process exits.
if "builder" not in st.session_state:
    st.session_state["builder"] = TourBuilder()
    st.session_state["resolver"] = RouteResolver(OsrmWalkingProvider(settings), max_workers=settings.resolver_max_workers)
    st.session_state["pins"] = []
    st.session_state["tour"] = None

builder: TourBuilder = st.session_state["builder"]
resolver: RouteResolver = st.session_state["resolver"]
pins = st.session_state["pins"]


def replan():
    st.session_state["tour"] = plan_walking_tour(builder, resolver)
    if resolver.pending:
        with st.spinner("🧭 Fetching walking paths..."):
            resolver.wait(timeout=settings.directions_timeout + 5)


def pin_point(point: Point):
    pins.append(point)
    builder.add_point(point)
    replan()


# Apply any segment results that arrived since the last rerun
resolver.collect()

st.title("🏛️ Plan Your Museum Walk")
st.markdown("Pin the exhibits you want to see and we'll walk you through them in the shortest order.")

# ==========================================
# SELECTION INPUT
# ==========================================
tab_coords, tab_search = st.tabs(["📍 Drop a Pin", "🔎 Find an Exhibit"])

with tab_coords:
    with st.form("pin_form", clear_on_submit=True):
        label = st.text_input("Exhibit name", "")
        col1, col2 = st.columns(2)
        with col1:
            lat = st.number_input("Latitude", value=settings.map_center_lat, format="%.6f")
        with col2:
            lon = st.number_input("Longitude", value=settings.map_center_lon, format="%.6f")
        if st.form_submit_button("Add Pin"):
            pin_point(Point(
                point_id=uuid.uuid4().hex,
                label=label or f"Pin {len(pins) + 1}",
                lat=lat,
                lon=lon,
            ))
            st.rerun()

with tab_search:
    with st.form("search_form", clear_on_submit=True):
        exhibit_name = st.text_input("What are you looking for?", "")
        venue = st.text_input("Museum or city", "")
        if st.form_submit_button("Search") and exhibit_name:
            with st.spinner(f"Looking up {exhibit_name}..."):
                found = locate_exhibit(exhibit_name, venue)
            if found:
                pin_point(found)
                st.rerun()
            else:
                st.error(f"Couldn't find '{exhibit_name}'. Try dropping a pin instead.")

# ==========================================
# PREFERENCES: toggle which pins are on the tour
# ==========================================
if pins:
    st.subheader("✨ Your Interests")
    changed = False
    for pin in pins:
        wanted = st.checkbox(pin.label, value=pin.selected, key=f"pin_{pin.point_id}")
        if wanted != pin.selected:
            builder.toggle_point(pin)
            changed = True
    if changed:
        replan()

# ==========================================
# MAP
# ==========================================
marker_frame = pd.DataFrame(
    [{
        "label": p.label,
        "lat": p.lat,
        "lon": p.lon,
        "color": [255, 75, 75] if p.selected else [160, 160, 160],
    } for p in pins],
    columns=["label", "lat", "lon", "color"],
)
path_frame = pd.DataFrame(
    [{"path": [[lon, lat] for lat, lon in polyline]} for polyline in resolver.rendered_polylines()],
    columns=["path"],
)

layers = [
    pdk.Layer("ScatterplotLayer", data=marker_frame, get_position=["lon", "lat"],
              get_fill_color="color", get_radius=15, pickable=True),
    pdk.Layer("PathLayer", data=path_frame, get_path="path",
              get_color=[0, 90, 255], width_min_pixels=4),
]
st.pydeck_chart(pdk.Deck(
    layers=layers,
    initial_view_state=pdk.ViewState(latitude=settings.map_center_lat, longitude=settings.map_center_lon, zoom=15),
    tooltip={"text": "{label}"},
))

# ==========================================
# ROUTE
# ==========================================
tour = st.session_state["tour"]
if builder.state is not TourState.READY or tour is None or not tour.has_path:
    st.info("Select at least two exhibits to get a walking route.")
else:
    st.subheader("🚶 Your Route")
    st.caption(f"About {tour.straight_line_m / 1000.0:.1f} km as the crow flies.")
    for i, segment in enumerate(resolver.segments):
        origin, destination = segment.origin.label, segment.destination.label
        if segment.status is SegmentStatus.RESOLVED:
            st.markdown(f"**{i + 1}.** {origin} ➔ {destination} — {estimate_walk(segment.distance_m)}")
        elif segment.status is SegmentStatus.FAILED:
            st.markdown(f"**{i + 1}.** {origin} ➔ {destination} — _{tour.legs[i][2]} (no walking path found)_")
        else:
            st.markdown(f"**{i + 1}.** {origin} ➔ {destination} — _finding path..._")

    if resolver.pending and st.button("🔄 Refresh"):
        st.rerun()

    st.markdown("### 🗺️ Navigate")
    st.markdown(f"[Open walking directions in Google Maps]({generate_walking_directions_url(tour.order)})")
