"""
Curated reference lists for the trackers.
"""
from functools import lru_cache

from .tracker import TrackerItem, TrackerType


CONTINENTS = [
    ("AF", "Africa"),
    ("AN", "Antarctica"),
    ("AS", "Asia"),
    ("EU", "Europe"),
    ("NA", "North America"),
    ("OC", "Oceania"),
    ("SA", "South America"),
]

# ISO 3166-1 alpha-2, UN members plus the two observer states
COUNTRIES = [
    ("AF", "Afghanistan"), ("AL", "Albania"), ("DZ", "Algeria"), ("AD", "Andorra"),
    ("AO", "Angola"), ("AG", "Antigua and Barbuda"), ("AR", "Argentina"), ("AM", "Armenia"),
    ("AU", "Australia"), ("AT", "Austria"), ("AZ", "Azerbaijan"), ("BS", "Bahamas"),
    ("BH", "Bahrain"), ("BD", "Bangladesh"), ("BB", "Barbados"), ("BY", "Belarus"),
    ("BE", "Belgium"), ("BZ", "Belize"), ("BJ", "Benin"), ("BT", "Bhutan"),
    ("BO", "Bolivia"), ("BA", "Bosnia and Herzegovina"), ("BW", "Botswana"), ("BR", "Brazil"),
    ("BN", "Brunei"), ("BG", "Bulgaria"), ("BF", "Burkina Faso"), ("BI", "Burundi"),
    ("CV", "Cabo Verde"), ("KH", "Cambodia"), ("CM", "Cameroon"), ("CA", "Canada"),
    ("CF", "Central African Republic"), ("TD", "Chad"), ("CL", "Chile"), ("CN", "China"),
    ("CO", "Colombia"), ("KM", "Comoros"), ("CG", "Congo"), ("CD", "DR Congo"),
    ("CR", "Costa Rica"), ("CI", "Côte d'Ivoire"), ("HR", "Croatia"), ("CU", "Cuba"),
    ("CY", "Cyprus"), ("CZ", "Czechia"), ("DK", "Denmark"), ("DJ", "Djibouti"),
    ("DM", "Dominica"), ("DO", "Dominican Republic"), ("EC", "Ecuador"), ("EG", "Egypt"),
    ("SV", "El Salvador"), ("GQ", "Equatorial Guinea"), ("ER", "Eritrea"), ("EE", "Estonia"),
    ("SZ", "Eswatini"), ("ET", "Ethiopia"), ("FJ", "Fiji"), ("FI", "Finland"),
    ("FR", "France"), ("GA", "Gabon"), ("GM", "Gambia"), ("GE", "Georgia"),
    ("DE", "Germany"), ("GH", "Ghana"), ("GR", "Greece"), ("GD", "Grenada"),
    ("GT", "Guatemala"), ("GN", "Guinea"), ("GW", "Guinea-Bissau"), ("GY", "Guyana"),
    ("HT", "Haiti"), ("HN", "Honduras"), ("HU", "Hungary"), ("IS", "Iceland"),
    ("IN", "India"), ("ID", "Indonesia"), ("IR", "Iran"), ("IQ", "Iraq"),
    ("IE", "Ireland"), ("IL", "Israel"), ("IT", "Italy"), ("JM", "Jamaica"),
    ("JP", "Japan"), ("JO", "Jordan"), ("KZ", "Kazakhstan"), ("KE", "Kenya"),
    ("KI", "Kiribati"), ("KW", "Kuwait"), ("KG", "Kyrgyzstan"), ("LA", "Laos"),
    ("LV", "Latvia"), ("LB", "Lebanon"), ("LS", "Lesotho"), ("LR", "Liberia"),
    ("LY", "Libya"), ("LI", "Liechtenstein"), ("LT", "Lithuania"), ("LU", "Luxembourg"),
    ("MG", "Madagascar"), ("MW", "Malawi"), ("MY", "Malaysia"), ("MV", "Maldives"),
    ("ML", "Mali"), ("MT", "Malta"), ("MH", "Marshall Islands"), ("MR", "Mauritania"),
    ("MU", "Mauritius"), ("MX", "Mexico"), ("FM", "Micronesia"), ("MD", "Moldova"),
    ("MC", "Monaco"), ("MN", "Mongolia"), ("ME", "Montenegro"), ("MA", "Morocco"),
    ("MZ", "Mozambique"), ("MM", "Myanmar"), ("NA", "Namibia"), ("NR", "Nauru"),
    ("NP", "Nepal"), ("NL", "Netherlands"), ("NZ", "New Zealand"), ("NI", "Nicaragua"),
    ("NE", "Niger"), ("NG", "Nigeria"), ("KP", "North Korea"), ("MK", "North Macedonia"),
    ("NO", "Norway"), ("OM", "Oman"), ("PK", "Pakistan"), ("PW", "Palau"),
    ("PS", "Palestine"), ("PA", "Panama"), ("PG", "Papua New Guinea"), ("PY", "Paraguay"),
    ("PE", "Peru"), ("PH", "Philippines"), ("PL", "Poland"), ("PT", "Portugal"),
    ("QA", "Qatar"), ("RO", "Romania"), ("RU", "Russia"), ("RW", "Rwanda"),
    ("KN", "Saint Kitts and Nevis"), ("LC", "Saint Lucia"),
    ("VC", "Saint Vincent and the Grenadines"), ("WS", "Samoa"), ("SM", "San Marino"),
    ("ST", "São Tomé and Príncipe"), ("SA", "Saudi Arabia"), ("SN", "Senegal"),
    ("RS", "Serbia"), ("SC", "Seychelles"), ("SL", "Sierra Leone"), ("SG", "Singapore"),
    ("SK", "Slovakia"), ("SI", "Slovenia"), ("SB", "Solomon Islands"), ("SO", "Somalia"),
    ("ZA", "South Africa"), ("KR", "South Korea"), ("SS", "South Sudan"), ("ES", "Spain"),
    ("LK", "Sri Lanka"), ("SD", "Sudan"), ("SR", "Suriname"), ("SE", "Sweden"),
    ("CH", "Switzerland"), ("SY", "Syria"), ("TJ", "Tajikistan"), ("TZ", "Tanzania"),
    ("TH", "Thailand"), ("TL", "Timor-Leste"), ("TG", "Togo"), ("TO", "Tonga"),
    ("TT", "Trinidad and Tobago"), ("TN", "Tunisia"), ("TR", "Türkiye"), ("TM", "Turkmenistan"),
    ("TV", "Tuvalu"), ("UG", "Uganda"), ("UA", "Ukraine"), ("AE", "United Arab Emirates"),
    ("GB", "United Kingdom"), ("US", "United States"), ("UY", "Uruguay"), ("UZ", "Uzbekistan"),
    ("VU", "Vanuatu"), ("VA", "Vatican City"), ("VE", "Venezuela"), ("VN", "Vietnam"),
    ("YE", "Yemen"), ("ZM", "Zambia"), ("ZW", "Zimbabwe"),
]

STATES = [
    ("AL", "Alabama"), ("AK", "Alaska"), ("AZ", "Arizona"), ("AR", "Arkansas"),
    ("CA", "California"), ("CO", "Colorado"), ("CT", "Connecticut"), ("DE", "Delaware"),
    ("FL", "Florida"), ("GA", "Georgia"), ("HI", "Hawaii"), ("ID", "Idaho"),
    ("IL", "Illinois"), ("IN", "Indiana"), ("IA", "Iowa"), ("KS", "Kansas"),
    ("KY", "Kentucky"), ("LA", "Louisiana"), ("ME", "Maine"), ("MD", "Maryland"),
    ("MA", "Massachusetts"), ("MI", "Michigan"), ("MN", "Minnesota"), ("MS", "Mississippi"),
    ("MO", "Missouri"), ("MT", "Montana"), ("NE", "Nebraska"), ("NV", "Nevada"),
    ("NH", "New Hampshire"), ("NJ", "New Jersey"), ("NM", "New Mexico"), ("NY", "New York"),
    ("NC", "North Carolina"), ("ND", "North Dakota"), ("OH", "Ohio"), ("OK", "Oklahoma"),
    ("OR", "Oregon"), ("PA", "Pennsylvania"), ("RI", "Rhode Island"), ("SC", "South Carolina"),
    ("SD", "South Dakota"), ("TN", "Tennessee"), ("TX", "Texas"), ("UT", "Utah"),
    ("VT", "Vermont"), ("VA", "Virginia"), ("WA", "Washington"), ("WV", "West Virginia"),
    ("WI", "Wisconsin"), ("WY", "Wyoming"),
]

SUBWAY_SYSTEMS = [
    ("nyc-subway", "New York City Subway", "New York, US"),
    ("wmata-metrorail", "Washington Metro", "Washington, D.C., US"),
    ("chicago-l", "Chicago 'L'", "Chicago, US"),
    ("bart", "BART", "San Francisco Bay Area, US"),
    ("mbta-subway", "MBTA Subway", "Boston, US"),
    ("septa-subway", "SEPTA Metro", "Philadelphia, US"),
    ("la-metro-rail", "LA Metro Rail", "Los Angeles, US"),
    ("marta", "MARTA", "Atlanta, US"),
    ("toronto-subway", "Toronto Subway", "Toronto, CA"),
    ("montreal-metro", "Montreal Metro", "Montreal, CA"),
    ("mexico-city-metro", "Mexico City Metro", "Mexico City, MX"),
    ("sao-paulo-metro", "São Paulo Metro", "São Paulo, BR"),
    ("buenos-aires-subte", "Buenos Aires Subte", "Buenos Aires, AR"),
    ("santiago-metro", "Santiago Metro", "Santiago, CL"),
    ("london-underground", "London Underground", "London, GB"),
    ("paris-metro", "Paris Métro", "Paris, FR"),
    ("berlin-ubahn", "Berlin U-Bahn", "Berlin, DE"),
    ("munich-ubahn", "Munich U-Bahn", "Munich, DE"),
    ("madrid-metro", "Madrid Metro", "Madrid, ES"),
    ("barcelona-metro", "Barcelona Metro", "Barcelona, ES"),
    ("lisbon-metro", "Lisbon Metro", "Lisbon, PT"),
    ("rome-metro", "Rome Metro", "Rome, IT"),
    ("milan-metro", "Milan Metro", "Milan, IT"),
    ("vienna-ubahn", "Vienna U-Bahn", "Vienna, AT"),
    ("prague-metro", "Prague Metro", "Prague, CZ"),
    ("stockholm-metro", "Stockholm Metro", "Stockholm, SE"),
    ("copenhagen-metro", "Copenhagen Metro", "Copenhagen, DK"),
    ("amsterdam-metro", "Amsterdam Metro", "Amsterdam, NL"),
    ("moscow-metro", "Moscow Metro", "Moscow, RU"),
    ("istanbul-metro", "Istanbul Metro", "Istanbul, TR"),
    ("dubai-metro", "Dubai Metro", "Dubai, AE"),
    ("delhi-metro", "Delhi Metro", "Delhi, IN"),
    ("singapore-mrt", "Singapore MRT", "Singapore, SG"),
    ("hong-kong-mtr", "Hong Kong MTR", "Hong Kong"),
    ("taipei-metro", "Taipei Metro", "Taipei, TW"),
    ("seoul-subway", "Seoul Subway", "Seoul, KR"),
    ("tokyo-metro", "Tokyo Metro", "Tokyo, JP"),
    ("osaka-metro", "Osaka Metro", "Osaka, JP"),
    ("beijing-subway", "Beijing Subway", "Beijing, CN"),
    ("shanghai-metro", "Shanghai Metro", "Shanghai, CN"),
    ("sydney-metro", "Sydney Metro", "Sydney, AU"),
]

NATIONAL_PARKS = [
    ("acad", "Acadia", "Maine"),
    ("npsa", "American Samoa", "American Samoa"),
    ("arch", "Arches", "Utah"),
    ("badl", "Badlands", "South Dakota"),
    ("bibe", "Big Bend", "Texas"),
    ("bisc", "Biscayne", "Florida"),
    ("blca", "Black Canyon of the Gunnison", "Colorado"),
    ("brca", "Bryce Canyon", "Utah"),
    ("cany", "Canyonlands", "Utah"),
    ("care", "Capitol Reef", "Utah"),
    ("cave", "Carlsbad Caverns", "New Mexico"),
    ("chis", "Channel Islands", "California"),
    ("cong", "Congaree", "South Carolina"),
    ("crla", "Crater Lake", "Oregon"),
    ("cuva", "Cuyahoga Valley", "Ohio"),
    ("deva", "Death Valley", "California, Nevada"),
    ("dena", "Denali", "Alaska"),
    ("drto", "Dry Tortugas", "Florida"),
    ("ever", "Everglades", "Florida"),
    ("gaar", "Gates of the Arctic", "Alaska"),
    ("jeff", "Gateway Arch", "Missouri"),
    ("glac", "Glacier", "Montana"),
    ("glba", "Glacier Bay", "Alaska"),
    ("grca", "Grand Canyon", "Arizona"),
    ("grte", "Grand Teton", "Wyoming"),
    ("grba", "Great Basin", "Nevada"),
    ("grsa", "Great Sand Dunes", "Colorado"),
    ("grsm", "Great Smoky Mountains", "North Carolina, Tennessee"),
    ("gumo", "Guadalupe Mountains", "Texas"),
    ("hale", "Haleakalā", "Hawaii"),
    ("havo", "Hawaiʻi Volcanoes", "Hawaii"),
    ("hosp", "Hot Springs", "Arkansas"),
    ("indu", "Indiana Dunes", "Indiana"),
    ("isro", "Isle Royale", "Michigan"),
    ("jotr", "Joshua Tree", "California"),
    ("katm", "Katmai", "Alaska"),
    ("kefj", "Kenai Fjords", "Alaska"),
    ("seki-kings", "Kings Canyon", "California"),
    ("kova", "Kobuk Valley", "Alaska"),
    ("lacl", "Lake Clark", "Alaska"),
    ("lavo", "Lassen Volcanic", "California"),
    ("maca", "Mammoth Cave", "Kentucky"),
    ("meve", "Mesa Verde", "Colorado"),
    ("mora", "Mount Rainier", "Washington"),
    ("neri", "New River Gorge", "West Virginia"),
    ("noca", "North Cascades", "Washington"),
    ("olym", "Olympic", "Washington"),
    ("pefo", "Petrified Forest", "Arizona"),
    ("pinn", "Pinnacles", "California"),
    ("redw", "Redwood", "California"),
    ("romo", "Rocky Mountain", "Colorado"),
    ("sagu", "Saguaro", "Arizona"),
    ("seki-sequoia", "Sequoia", "California"),
    ("shen", "Shenandoah", "Virginia"),
    ("thro", "Theodore Roosevelt", "North Dakota"),
    ("viis", "Virgin Islands", "U.S. Virgin Islands"),
    ("voya", "Voyageurs", "Minnesota"),
    ("whsa", "White Sands", "New Mexico"),
    ("wica", "Wind Cave", "South Dakota"),
    ("wrst", "Wrangell–St. Elias", "Alaska"),
    ("yell", "Yellowstone", "Wyoming, Montana, Idaho"),
    ("yose", "Yosemite", "California"),
    ("zion", "Zion", "Utah"),
]


@lru_cache(maxsize=None)
def tracker_items(tracker: TrackerType) -> tuple[TrackerItem, ...]:
    """Reference list for a tracker, in display order."""
    if tracker == TrackerType.COUNTRIES:
        return tuple(TrackerItem(id=code, name=name) for code, name in COUNTRIES)
    if tracker == TrackerType.STATES:
        return tuple(TrackerItem(id=code, name=name) for code, name in STATES)
    if tracker == TrackerType.CONTINENTS:
        return tuple(TrackerItem(id=code, name=name) for code, name in CONTINENTS)
    if tracker == TrackerType.SUBWAY_SYSTEMS:
        return tuple(TrackerItem(id=i, name=n, subtitle=s) for i, n, s in SUBWAY_SYSTEMS)
    if tracker == TrackerType.NATIONAL_PARKS:
        return tuple(TrackerItem(id=i, name=n, subtitle=s) for i, n, s in NATIONAL_PARKS)
    return ()


def valid_ids(tracker: TrackerType) -> frozenset[str]:
    return frozenset(item.id for item in tracker_items(tracker))
