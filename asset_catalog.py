# ─────────────────────────────────────────────────────────────────────────────
#  Asset catalog
#
#  PEOPLE_IMAGES  CC-licensed / public-domain photos downloaded from
#                 Wikimedia Commons into public/images/people/.
#  SCENE_PROMPTS  prompts sent to the image-generation backend; results land
#                 in public/images/scenes/.
#
#  Items are processed in the order they appear here.  The attribution
#  manifest is written in the same order.
# ─────────────────────────────────────────────────────────────────────────────
from typing import Literal

from pydantic import BaseModel, Field

SceneSize = Literal["1024x1024", "1792x1024", "1024x1792"]


class PersonImage(BaseModel):
    name:        str
    filename:    str
    url:         str
    attribution: str


class ScenePrompt(BaseModel):
    name:     str
    filename: str
    prompt:   str = Field(min_length=1)
    size:     SceneSize


PEOPLE_IMAGES: list[PersonImage] = [
    PersonImage(
        name="Jimmy Kimmel",
        filename="jimmy_kimmel.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/0/01/Jimmy_Kimmel_in_2015.jpg",
        attribution="Public Domain - White House Photo by Pete Souza",
    ),
    PersonImage(
        name="Trevor Noah",
        filename="trevor_noah.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/2/28/Trevor_Noah_%2853554114243%29_%28portrait_crop%29.jpg",
        attribution="CC BY 2.0 - Web Summit Qatar",
    ),
    PersonImage(
        name="Kathy Griffin",
        filename="kathy_griffin.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/7/7e/Kathy_in_2008_cropped.jpg",
        attribution="CC BY-SA 2.0 - Rob Marquardt",
    ),
    PersonImage(
        name="Melania Trump",
        filename="melania_trump.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/7/77/Melania_Trump_official_portrait_%28cropped%29.jpg",
        attribution="CC BY 3.0 US - White House Photo by Regine Mahaux",
    ),
    PersonImage(
        name="Rosie O'Donnell",
        filename="rosie_odonnell.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/9/9a/Rosie_O%27Donnell_by_David_Shankbone.jpg",
        attribution="CC BY-SA 3.0 - David Shankbone",
    ),
    PersonImage(
        name="Robert De Niro",
        filename="robert_deniro.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/0/01/Robert_De_Niro_2011_Shankbone.JPG",
        attribution="CC BY 3.0 - David Shankbone",
    ),
    PersonImage(
        name="Tom Hanks",
        filename="tom_hanks.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/6/66/Tom_Hanks_2014.jpg",
        attribution="Public Domain - U.S. Department of State",
    ),
    PersonImage(
        name="Meryl Streep",
        filename="meryl_streep.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/a/a3/Meryl_Streep_interview_at_Festival_de_Cannes_2024_%28cropped%29.jpg",
        attribution="CC BY-SA 4.0 - Kevin Payravi / WikiPortraits",
    ),
    PersonImage(
        name="Alec Baldwin",
        filename="alec_baldwin.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/9/99/Alec_Baldwin_by_David_Shankbone.jpg",
        attribution="CC BY-SA 3.0 - David Shankbone",
    ),
    PersonImage(
        name="Jussie Smollett",
        filename="jussie_smollett.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/0/0d/Jussie_Smollett_%2826362136311%29.jpg",
        attribution="CC BY-SA 2.0 - Dominick D",
    ),
    PersonImage(
        name="Mark Ruffalo",
        filename="mark_ruffalo.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/b/be/Mark_Ruffalo_%2826758760433%29.jpg",
        attribution="CC BY-SA 2.0 - Greg2600",
    ),
    PersonImage(
        name="Dinesh D'Souza",
        filename="dinesh_dsouza.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/6/6a/Dinesh_D%27Souza_booking_photo.jpg",
        attribution="Public Domain - U.S. Federal Government booking photo",
    ),
    PersonImage(
        name="Brett Ratner",
        filename="brett_ratner.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/6/60/Brett_Ratner_2012_Shankbone.JPG",
        attribution="CC BY 3.0 - David Shankbone",
    ),
    PersonImage(
        name="Donald Trump",
        filename="donald_trump.jpg",
        url="https://upload.wikimedia.org/wikipedia/commons/5/56/Donald_Trump_official_portrait.jpg",
        attribution="Public Domain - White House Photo by Shealah Craighead",
    ),
]


SCENE_PROMPTS: list[ScenePrompt] = [
    ScenePrompt(
        name="Hero Banner",
        filename="hero_banner.png",
        size="1792x1024",
        prompt=(
            "A hilariously cheap awards ceremony set up in a parking lot at night. A small folding "
            "table with a spray-painted gold plastic trophy on it. Christmas string lights tangled on "
            "parking meters. A wrinkled red bath towel laid out as a \"red carpet\" on the asphalt. "
            "A cardboard sign reading \"AWARDS\" in gold spray paint. Cinematic wide shot, dramatic "
            "lighting that contrasts with the absurd cheapness. Photorealistic."
        ),
    ),
    ScenePrompt(
        name="Trophy",
        filename="trophy.png",
        size="1024x1024",
        prompt=(
            "A participation trophy from a dollar store, crudely spray-painted gold, sitting on a "
            "folding card table with a paper tablecloth. The trophy has a tiny generic figure on top. "
            "There is visible dripping gold spray paint and fingerprints. Shot against a dark velvet "
            "curtain backdrop that has a visible seam and is slightly crooked. Studio product "
            "photography style, dramatic golden lighting."
        ),
    ),
    ScenePrompt(
        name="Melania Movie Poster Parody",
        filename="melania_poster.png",
        size="1024x1792",
        prompt=(
            "A satirical movie poster for a fictional documentary. Golden gilded ornate baroque "
            "picture frame, but the frame is clearly plastic and spray-painted. Inside the frame is a "
            "view of a luxurious marble hallway with gold chandeliers, but it looks like a hotel "
            "lobby. At the bottom in elegant serif font: \"VIRTUALLY UNWATCHABLE\" and \"1.3 STARS\". "
            "The overall feel is ostentatious luxury meets budget filmmaking. No people in the image."
        ),
    ),
    ScenePrompt(
        name="Going the Extra Mule",
        filename="mule_award.png",
        size="1024x1024",
        prompt=(
            "A cartoon-style illustration of a stubborn mule wearing a tiny golden crown, standing "
            "next to a ballot drop box in a parking lot. The mule has a defiant expression and is "
            "holding a rolled-up document that says \"DEBUNKED\" in its mouth. Humorous editorial "
            "cartoon style with bold outlines. Golden warm color palette."
        ),
    ),
    ScenePrompt(
        name="Best Western",
        filename="best_western.png",
        size="1792x1024",
        prompt=(
            "A Wild West movie set that has clearly gone wrong. A broken director's chair tipped over "
            "in a dusty desert town set. A prop gun lying on the ground with a \"SAFETY FIRST\" sign "
            "that has fallen off the wall. Tumbleweeds rolling through. The scene has dramatic "
            "golden-hour western lighting but everything is slightly askew and amateur. Cinematic "
            "wide shot, film grain."
        ),
    ),
    ScenePrompt(
        name="Parking Lot Venue",
        filename="venue.png",
        size="1792x1024",
        prompt=(
            "A parking lot behind a large theatre building at night, set up as a makeshift outdoor "
            "event venue. Folding chairs arranged in rows on asphalt, facing a small wooden stage "
            "made of pallets. A hand-painted banner hangs between two light poles reading \"LOW "
            "RATINGS ACADEMY AWARDS\". Christmas lights strung haphazardly. A single spotlight "
            "duct-taped to a parking meter. Cinematic night photography, moody golden lighting."
        ),
    ),
]
