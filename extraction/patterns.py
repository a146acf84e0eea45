"""
Centralized slug grammars, one entry per review platform.

- NAME_CHARS: characters a business name may use inside a URL path segment.
- LOOSE_NAME_CHARS: NAME_CHARS plus the punctuation some platforms leave unencoded.
- SLUG_FORMATS: platform key -> example URL, acceptable formats (most canonical
  first), extraction patterns (tried in order, first match wins) and whether the
  captured slug is lower-cased.

Patterns are matched case-insensitively against the whole input and must be
anchored with "^" and "$". Each one has a single capturing group for the slug;
a pattern without a group returns its whole match. A pattern may also be
written as "@body@flags" to carry its own flags.

Adding a platform means adding an entry here, nothing else.
"""


# Neither class admits whitespace: pasted URLs encode spaces as %20.
NAME_CHARS = r"-+%_\p{L}\p{N}',\""
LOOSE_NAME_CHARS = NAME_CHARS + r"*~`‘\"¨“„°,:%!?@#.\(\)\\|®©™&£$€¢"

SLUG_FORMATS = {
    "abritel": {
        "example_url": "https://www.abritel.fr/pdp/lo/1217263",
        "acceptable_formats": [
            "pdp/lo/1217263",
            "https://www.abritel.fr/pdp/lo/1217263",
            "location-vacances/p2320528vb",
            "https://www.abritel.fr/location-vacances/p2320528vb",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*abritel\.fr)?/)?((?:[\w-]+/)*[a-z]{0,2}\d+[a-z]{0,2})/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "agoda": {
        "example_url": "https://www.agoda.com/days-inn-by-wyndham-miami-international-airport/hotel/miami-fl-us.html",
        "acceptable_formats": [
            "ibis-styles-paris-roissy-cdg-hotel/hotel/paris-fr",
            "https://www.agoda.com/ibis-styles-paris-roissy-cdg-hotel/hotel/paris-fr.html",
            "https://www.agoda.com/ibis-styles-paris-roissy-cdg-hotel/reviews/paris-fr.html",
            "https://www.agoda.com/ibis-styles-paris-roissy-cdg-hotel/hotel/all/paris-fr.html",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*agoda(?:\.[a-z]{2,3}){1,2})?/)?(?:[a-z]{2}-[a-z]{2}/)?([\w-]+/\w+/(?:all/)?(?:[\w-]+/)?[\w-]+)(?:\.html(?:[?#/].*)?)?$",
        ],
        "lower_cased": False,
    },
    "airbnb": {
        "example_url": "https://www.airbnb.co.in/rooms/1100739390072754079",
        "acceptable_formats": [
            "1100739390072754079",
            "rooms/1100739390072754079",
            "https://www.airbnb.co.in/rooms/1100739390072754079",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*airbnb(?:\.[a-z]{2,3}){1,2}/)?/?))?(?:[\w+-]+)?/)?([\d+-]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "aliexpress": {
        "example_url": "https://www.aliexpress.com/item/1005008932789738.html",
        "acceptable_formats": [
            "1005008932789738",
            "1005008932789738.html",
            "item/1005008932789738.html",
            "https://www.aliexpress.com/item/1005008932789738.html",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*aliexpress(?:\.[a-z]{2,3}){1,2}/)?/?))?(?:[\w+-]+)?/)?([\d+]+)(?:\.html)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "alternative-to": {
        "example_url": "https://www.alternativeto.net/software/typeform/about",
        "acceptable_formats": [
            "typeform",
            "software/typeform",
            "https://www.alternativeto.net/software/typeform",
            "https://www.alternativeto.net/software/typeform/about",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*alternativeto(?:\.[a-z]{2,3}){1,2})?/)?software)?/)?([-\w]+)(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "angi": {
        "example_url": "https://www.angi.com/companylist/us/ca/poway/crawl-space-and-attic-pro-reviews-9469089.htm",
        "acceptable_formats": [
            "ca/poway/crawl-space-and-attic-pro-reviews-9469089",
            "https://www.angi.com/companylist/us/ca/poway/crawl-space-and-attic-pro-reviews-9469089.htm",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*angi(?:eslist)?\.com)?/)?companylist)?/)?us)?/)?([a-z]{2}/[\w-]+/[" + NAME_CHARS + r"]+-reviews-\d+)(?:\.htm/?(?:[?#].*)?)?$",
        ],
        "lower_cased": False,
    },
    "aptguide": {
        "example_url": "https://www.apartmentguide.com/apartments/California/San-Diego/The-Village-Mission-Valley/155467/",
        "acceptable_formats": [
            "88451",
            "Maa-Lenox-Atlanta-GA-88451",
            "MAA-Lenox/88451",
            "apartments/California/San-Diego/MAA-Lenox/88451",
            "rent/Maa-Lenox-Atlanta-GA-88451",
            "https://www.apartmentguide.com/apartments/Georgia/Atlanta/MAA-Lenox/88451/",
            "https://www.apartmentguide.com/rent/Maa-Lenox-Atlanta-GA-88451/",
            "https://www.apartmentguide.com/a/Quincy-New-York-NY-5920858/",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*apartmentguide\.com)?/)?[a-z_]+)?/)?(?:[a-z-]+/){0,2}((?:[\w~+!\@-]*[/-])?[\da-z]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "aptratings": {
        "example_url": "https://www.apartmentratings.com/tx/dallas/courts-at-preston-oaks_972788142275240",
        "acceptable_formats": [
            "courts-at-preston-oaks_972788142275240",
            "https://www.apartmentratings.com/tx/dallas/courts-at-preston-oaks_972788142275240",
            "972788142275240",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*apartmentratings\.com)?/)?[a-z]{2}/[" + LOOSE_NAME_CHARS + r"]+/)?((?:[" + LOOSE_NAME_CHARS + r"]+_)?\d+)(?:_\w+)?(?:/\w+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "apartments": {
        "example_url": "https://www.apartments.com/overture-san-marcos-55-senior-housing-apa-san-marcos-ca/5jm0mwp",
        "acceptable_formats": [
            "5jm0mwp",
            "overture-san-marcos-55-senior-housing-apa-san-marcos-ca/5jm0mwp",
            "https://www.apartments.com/overture-san-marcos-55-senior-housing-apa-san-marcos-ca/5jm0mwp",
            "https://www.apartments.com/es/overture-san-marcos-55-senior-housing-apa-san-marcos-ca/5jm0mwp",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*apartments\.com)?/)?(?:[a-z]{2}/)?[\w-]+)?/)?([\da-z]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "place-for-mom": {
        "example_url": "https://www.aplaceformom.com/community/amber-court-of-brooklyn-61756",
        "acceptable_formats": [
            "community/amber-court-of-brooklyn-61756",
            "https://www.aplaceformom.com/community/amber-court-of-brooklyn-61756",
            "providers/aa-blank-7671",
            "https://www.aplaceformom.com/providers/aa-blank-7671",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*aplaceformom(?:\.[a-z]{2,3}){1,2})?/)?((?:community|providers)/(?:\w+-)*\d+)/?(?:/?[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "app-store": {
        "example_url": "https://apps.apple.com/app/bna/id1523383806",
        "acceptable_formats": [
            "1523383806",
            "bna/id1523383806",
            "app/bna/id1523383806",
            "https://apps.apple.com/app/bna/id1523383806",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*apps.apple(?:\.[a-z]{2,3}){1,2})?/)?(?:[\w]{2}/)?)?)?app)?/)?[\w-]+)?/)?)(?:id)?([\d]+)(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "apple-maps": {
        "example_url": "https://maps.apple.com/place?auid=2404254127207869658",
        "acceptable_formats": [
            "2404254127207869658",
            "https://maps.apple.com/place?auid=2404254127207869658",
            "ID4C29E6DBFA72090",
            "https://maps.apple.com/place?placeid=ID4C29E6DBFA72090",
        ],
        "patterns": [
            r"^(?:https?://)?(?:[\w-]+\.)*maps\.apple\.[a-z]{2,3}(?:\.[a-z]{2})?(?:/place)?/?\?(?:.*&)?(?:au|place)id=([A-Z\d]+)(?:[#&].*)?$",
            # auid / placeid on its own.
            r"^([A-Z\d]+)$",
        ],
        "lower_cased": False,
    },
    "auto-trader": {
        "example_url": "https://www.autotrader.com/car-dealers/schaumburg-il/892869/zeigler-chevrolet-schaumburg/",
        "acceptable_formats": [
            "car-dealers/schaumburg-il/892869",
            "car-dealers/schaumburg-il/892869/zeigler-chevrolet-schaumburg/",
            "https://www.autotrader.com/car-dealers/schaumburg-il/892869/zeigler-chevrolet-schaumburg/",
            "cars-for-sale/vehicle/750347196",
            "https://www.autotrader.com/cars-for-sale/vehicle/750347196",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*autotrader(?:\.[a-z]{2,3}){1,2})?/)?((?:cars-for-sale|car-dealers)/[-\w]+/\d+)(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "avvo": {
        "example_url": "https://www.avvo.com/attorneys/02109-ma-steven-gurdin-1359546.html",
        "acceptable_formats": [
            "02109-ma-steven-gurdin-1359546",
            "1359546",
            "https://www.avvo.com/attorneys/02109-ma-steven-gurdin-1359546.html",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*avvo(?:\.[a-z]{2,3}){1,2})?/)?attorneys)?/)?((?:\w+-)*\d+)(?:(?:/[a-z]+)*\.html/?(?:/?[?#].*)?)?$",
        ],
    },
    "bbb": {
        "example_url": "https://www.bbb.org/us/pa/king-of-prussia/profile/property-management/morgan-properties-0241-80016288",
        "acceptable_formats": [
            "morgan-properties-0241-80016288",
            "https://www.bbb.org/us/pa/king-of-prussia/profile/property-management/morgan-properties-0241-80016288",
            "0241-80016288",
        ],
        "patterns": [
            r"^(?:(?:https?://)?(?:[\w-]+\.)*bbb\.org/[a-zA-Z]+/[a-zA-Z]+/[" + NAME_CHARS + r"]+/(?:profile|perfil|charity-review)/[" + NAME_CHARS + r"]+/)?((?:[" + LOOSE_NAME_CHARS + r"]+)?\d+-\d+)(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "best-buy": {
        "example_url": "https://www.bestbuy.com/site/sony-alpha-6100-mirrorless-4k-video-camera-with-e-pz-16-50mm-lens-black/6614508.p",
        "acceptable_formats": [
            "com/site/lg-75-class-ut70-series-led-4k-uhd-smart-webos-tv-2024/6593575.p?skuId=6593575",
            "https://www.bestbuy.com/site/sony-alpha-6100-mirrorless-4k-video-camera-with-e-pz-16-50mm-lens-black/6614508.p",
            "https://www.bestbuy.ca/en-ca/product/lg-0-9-cu-ft-microwave-with-smart-inverter-mser0990s-stainless-steel/17937198",
        ],
        "patterns": [
            r"^(?:(?:https?://)?(?:[\w-]+\.)*bestbuy\.)?([a-z]{2,3}/(?:[a-z]{2}-[a-z]{2}/)?(?:site|product)(?:/[\w.-]+)+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "bilbayt": {
        "example_url": "https://bilbayt.com/kw/en/vendors/fusion",
        "acceptable_formats": [
            "fusion",
            "vendors/fusion",
            "en/vendors/fusion",
            "kw/ar/vendors/fusion",
            "https://bilbayt.com/kw/en/vendors/fusion",
            "https://bilbayt.com/ae/ar/vendors/pattie-pattie",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*bilbayt(?:\.[a-z]{2,3}){1,2})?/)?(?:kw|ae))?/)?[a-z]{2})?/)?vendors)?/)?([\w-]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "bing": {
        "example_url": "https://www.bing.com/maps?osid=c5a1cb29-5171-494c-ad4c-a5c2599c7278",
        "acceptable_formats": [
            "c5a1cb29-5171-494c-ad4c-a5c2599c7278",
            "YN8000x16403903209167712259",
            "https://www.bing.com/maps?osid=c5a1cb29-5171-494c-ad4c-a5c2599c7278",
            "https://www.bing.com/maps?ypid=YN8000x16403903209167712259",
            "https://www.bing.com/maps?&ty=18&q=Sourdough%26Co.&ss=ypid.873x16370840542229259941",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*bing(?:\.[a-z]{2,3}){1,2})?/)?(?:maps))?/?)?(?:(?:\?.*)))?(?:osid|ypid)[=.])?([\w-]+)(?:&.*)?$",
        ],
        "lower_cased": False,
    },
    "bol": {
        "example_url": "https://www.bol.com/be/fr/v/supfoods/1814801",
        "acceptable_formats": [
            "9300000001023970",
            "transmetteur-fm-bluetooth-wegman-chargeur-de-voiture-kit-de-voiture-bluetooth/9300000001023970",
            "p/transmetteur-fm-bluetooth-wegman-chargeur-de-voiture-kit-de-voiture-bluetooth/9300000001023970",
            "nl/p/transmetteur-fm-bluetooth-wegman-chargeur-de-voiture-kit-de-voiture-bluetooth/9300000001023970",
            "nl/fr/p/transmetteur-fm-bluetooth-wegman-chargeur-de-voiture-kit-de-voiture-bluetooth/9300000001023970",
            "https://www.bol.com/nl/fr/p/transmetteur-fm-bluetooth-wegman-chargeur-de-voiture-kit-de-voiture-bluetooth/9300000001023970",
            "be/v/supfoods/1814801",
            "be/fr/v/supfoods/1814801",
            "https://www.bol.com/be/fr/v/supfoods/1814801",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*bol(?:\.[a-z]{2,3}){1,2})?)?/)?((?:(?:(?:(?:be|nl)/(?:fr/|nl/)?)?[vp]/)?[\w-]+/)?\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "bookabach": {
        "example_url": "https://www.bookabach.co.nz/pdp/lo/1217263",
        "acceptable_formats": [
            "pdp/lo/1217263",
            "https://www.bookabach.co.nz/pdp/lo/1217263",
            "holiday-accommodation/p2320528vb",
            "https://www.bookabach.co.nz/holiday-accommodation/p2320528vb",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*bookabach\.co\.nz)?/)?((?:[\w-]+/)*[a-z]{0,2}\d+[a-z]{0,2})/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "booking": {
        "example_url": "https://www.booking.com/hotel/it/largo-argentina-apartment-daplace-apartments",
        "acceptable_formats": [
            "hotel/it/largo-argentina-apartment-daplace-apartments",
            "attractions/us/prywkuaglxhb-las-vegas-strip-helicopter-ride-at-night",
            "https://www.booking.com/hotel/it/largo-argentina-apartment-daplace-apartments.it.html",
            "https://www.booking.com/attractions/us/prywkuaglxhb-las-vegas-strip-helicopter-ride-at-night.html",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*booking(?:\.[a-z]{2,3}){1,2})?/)?((?:hotel|attractions)/[a-z]{2}/[\w-]+)(?:(?:\.[a-z]{2}(?:-[a-z]{2})?)?\.html(?:[?#].*)?)?$",
        ],
        "lower_cased": True,
    },
    "capterra": {
        "example_url": "https://www.capterra.com/p/149522/Salesflare/",
        "acceptable_formats": [
            "p/149522/Salesflare",
            "sp/8652/revlocal",
            "https://www.capterra.com/p/149522/Salesflare/reviews",
            "https://www.capterra.com/services/sp/8652/revlocal/",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*capterra(?:\.[a-z]{2,3}){1,2})?/)?((?:(?:services/)?s)?p/\d+/[\w-]+)(?:[?#/].*)?$",
        ],
        "lower_cased": False,
    },
    "car-dealer-reviews": {
        "example_url": "https://www.cardealerreviews.co.uk/dealership/1-stop-car-sales-peterborough",
        "acceptable_formats": [
            "1-stop-car-sales-peterborough",
            "dealership/1-stop-car-sales-peterborough",
            "https://www.cardealerreviews.co.uk/dealership/1-stop-car-sales-peterborough",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*cardealerreviews(?:\.[a-z]{2,3}){1,2})?/)?dealership)?/)?([-\w]+)(?:/?[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "care": {
        "example_url": "https://www.care.com/b/l/less-than-10-beds-regal-care/simi-valley-ca",
        "acceptable_formats": [
            "less-than-10-beds-regal-care/simi-valley-ca",
            "l/less-than-10-beds-regal-care/simi-valley-ca",
            "b/l/less-than-10-beds-regal-care/simi-valley-ca",
            "https://www.care.com/b/l/less-than-10-beds-regal-care/simi-valley-ca",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*care(?:\.[a-z]{2,3}){1,2})?/)?b)?/)?l)?/)?([\w-]+/[\w-]+)(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "carfax": {
        "example_url": "https://www.carfax.com/Reviews-Cronin-Chrysler-Dodge-Jeep-Ram-Lebanon-OH_P9E4IWXPNS",
        "acceptable_formats": [
            "Reviews-Cronin-Chrysler-Dodge-Jeep-Ram-Lebanon-OH_P9E4IWXPNS",
            "P9E4IWXPNS",
            "https://www.carfax.com/Reviews-Cronin-Chrysler-Dodge-Jeep-Ram-Lebanon-OH_P9E4IWXPNS",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*carfax(?:\.[a-z]{2,3}){1,2})?/)?(?:[a-z]{2}/)?(Reviews(?:-[A-Za-z\d_]+)+_[A-Z\d]{5,13})/?(?:[?#].*)?$",
            # Bare location id.
            r"@^[A-Z\d]{5,13}$@i",
        ],
        "lower_cased": False,
    },
    "car-gurus": {
        "example_url": "https://www.cargurus.com/Cars/m-Diamond-Honda-sp285048",
        "acceptable_formats": [
            "m-Diamond-Honda-sp285048",
            "https://www.cargurus.com/Cars/m-Diamond-Honda-sp285048",
            "https://www.cargurus.com/Cars/inventorylistingviewDetailsFilterViewInventoryListing.action?zip=90001&distance=50&entitySelectingHelper.selectedEntity=m124#listing=417878058/NONE/DEFAULT",
            "Cars/inventorylistingviewDetailsFilterViewInventoryListing.action?zip=90001&distance=50&entitySelectingHelper.selectedEntity=m124#listing=417878058/NONE/DEFAULT",
            "Cars/inventorylisting/vdp.action?listingId=414225544&pid=homepage~consumer~price_drop_shelf_card&position=1#listing=417878058",
            "vdp.action?listingId=414225544&pid=homepage~consumer~price_drop_shelf_card&position=1#listing=417878058",
            "listing=417878058",
            "listingId=414225544",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*cargurus(?:\.[a-z]{2,3}){1,2})?/)?Cars)?/)?([\w-]+-sp\d+)(?:/?[?#].*)?$",
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*cargurus(?:\.[a-z]{2,3}){1,2})?/)?Cars)?/)?[\w.-/]+)?/)?[?#])?.+)?(listing=\d+).*$",
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*cargurus(?:\.[a-z]{2,3}){1,2})?/)?Cars)?/)?[\w.-/]+)?/)?[?#])?.+)?(listingId=\d+).*$",
        ],
        "lower_cased": False,
    },
    "cars": {
        "example_url": "https://www.cars.com/dealers/6000406/porsche-downtown-chicago/",
        "acceptable_formats": [
            "6000406/porsche-downtown-chicago",
            "6000406",
            "dealers/6000406/porsche-downtown-chicago",
            "https://www.cars.com/dealers/6000406/porsche-downtown-chicago/",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*cars(?:\.[a-z]{2,3}){1,2})?/)?dealers)?/)?([\d]+(?:/[\w-]+)?)(?:/[\w-]+)*/?(?:/?[?#].*)?$",
        ],
    },
    "carvana": {
        "example_url": "https://www.carvana.com/vehicle/3619014",
        "acceptable_formats": [
            "3619014",
            "vehicle/3619014",
            "https://www.carvana.com/vehicle/3619014",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*carvana(?:\.[a-z]{2,3}){1,2})?/)?vehicle)?/)?(\d+)(?:/?[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "citysearch": {
        "example_url": "https://www.citysearch.com/profile/17639251",
        "acceptable_formats": [
            "17639251",
            "https://www.citysearch.com/profile/17639251",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*citysearch\.com)?/)?profile)?/)?(\d+)(?:/(?:(?:\w+/)?[" + NAME_CHARS + r"]+\.html/?(?:[?#].*)?)?)?$",
        ],
        "lower_cased": False,
    },
    "class-pass": {
        "example_url": "https://classpass.com/studios/bodi-scottsdale",
        "acceptable_formats": [
            "bodi-scottsdale",
            "studios/bodi-scottsdale",
            "https://classpass.com/studios/bodi-scottsdale",
            "25110",
            "https://classpass.com/studios/25110",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*classpass(?:\.[a-z]{2,3}){1,2})?/)?studios)?/)?([\w-]+)(?:/?[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "clutch": {
        "example_url": "https://www.clutch.co/profile/geekyants",
        "acceptable_formats": [
            "geekyants",
            "https://clutch.co/profile/geekyants",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*(?:clutch\.co)?)?/)?profile)?/)?([\w-]+)(?:/?[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "consumer-affairs": {
        "example_url": "https://www.consumeraffairs.com/solar-energy/sunpower.html",
        "acceptable_formats": [
            "solar-energy/sunpower",
            "https://www.consumeraffairs.com/solar-energy/sunpower.html",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*consumeraffairs(?:\.[a-z]{2,3}){1,2})?/)?((?:[\w-]+/)+[\w-]+)(?:\.html)?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "credit-karma": {
        "example_url": "https://www.creditkarma.com/credit-cards/insights/phillips-66-commercial-credit-card",
        "acceptable_formats": [
            "insights/amex-gold",
            "credit-cards/insights/phillips-66-commercial-credit-card",
            "personal-loan/single/id/lending-point-personal-loans",
            "auto-insurance/allstate",
            "https://www.creditkarma.com/reviews/auto-loan/single/id/AutoPay",
            "https://www.creditkarma.com/reviews/credit-card/single/id/CCCapitalOne1007",
            "https://www.creditkarma.com/credit-cards/insights/phillips-66-commercial-credit-card",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*creditkarma(?:\.[a-z]{2,3}){1,2})/)?(?:credit-cards|reviews)/)?)([\w/-]+)(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "customer-lobby": {
        "example_url": "https://www.customerlobby.com/reviews/1655/ontrack-staffing",
        "acceptable_formats": [
            "1655",
            "1655/ontrack-staffing",
            "https://www.customerlobby.com/reviews/1655/ontrack-staffing",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*customerlobby(?:\.[a-z]{2,3}){1,2})?/)?reviews)?/)?(\d+(?:/[-\w]+)?)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "dealer-rater": {
        "example_url": "https://www.dealerrater.com/dealer/Holiday-Chrysler-Dodge-Jeep-Ram-dealer-reviews-103572",
        "acceptable_formats": [
            "103572",
            "Holiday-Chrysler-Dodge-Jeep-Ram-dealer-reviews-103572",
            "dealer/Holiday-Chrysler-Dodge-Jeep-Ram-dealer-reviews-103572",
            "https://www.dealerrater.com/dealer/Holiday-Chrysler-Dodge-Jeep-Ram-dealer-reviews-103572",
            "sales/Matthew-Jackson-review-829308",
            "www.dealerrater.com/sales/Matthew-Jackson-review-829308",
            "https://www.dealerrater.com/sales/Matthew-Jackson-review-829308/",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*dealerrater(?:\.[a-z]{2,3}){1,2})?/)?((?:dealer/|sales/)?[\w-]*\d+)(?:/[\w-]+)?/?(?:[?#].*)?$",
        ],
    },
    "deliveroo": {
        "example_url": "https://deliveroo.co.uk/menu/Manchester/manchester-central/sandinista-2-old-bank-street",
        "acceptable_formats": [
            "sandinista-2-old-bank-street",
            "manchester-central/sandinista-2-old-bank-street",
            "Manchester/manchester-central/sandinista-2-old-bank-street",
            "menu/Manchester/manchester-central/sandinista-2-old-bank-street",
            "https://deliveroo.co.uk/menu/Manchester/manchester-central/sandinista-2-old-bank-street",
            "https://deliveroo.ae/menu/Sharjah/sharjah-industrial-1/jollibee-city-centre-sharjah",
            "https://deliveroo.fr/en/menu/Paris/franconville-la-garenne/five-guys-nice-franconville",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*deliveroo(?:\.[a-z]{2,3}){1,2})?/)?(?:[a-z]{2}/)?)?)?menu)?/)?[\w-]+)?/)?[\w-]+)?/)?([\w-]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "design-my-night": {
        "example_url": "https://www.designmynight.com/london/bars/city-of-london/sky-garden-bars",
        "acceptable_formats": [
            "sky-garden-bars",
            "london/bars/city-of-london/sky-garden-bars",
            "https://www.designmynight.com/london/bars/city-of-london/sky-garden-bars",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*designmynight(?:\.[a-z]{2,3}){1,2})?/)?(?:(?:[\w-]+/[\w-]+/)?(?:[\w-]+/)?)?([\w-]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "doctor": {
        "example_url": "https://www.doctor.com/Dr-Mark-Bouffard",
        "acceptable_formats": [
            "Dr-Mark-Bouffard",
            "https://www.doctor.com/Dr-Mark-Bouffard",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*doctor(?:\.[a-z]{2,3}){1,2})?/)?([-\w]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "doordash": {
        "example_url": "https://www.doordash.com/store/buffalo-wild-wings-lehi-202507",
        "acceptable_formats": [
            "buffalo-wild-wings-lehi-202507",
            "202507",
            "https://www.doordash.com/store/buffalo-wild-wings-lehi-202507",
            "https://www.doordash.com/reviews/store/buffalo-wild-wings-lehi-202507",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*doordash\.com)?/)?(?:reviews/)?store)?/)?((?:\w+-)*\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "ebay": {
        "example_url": "https://www.ebay.com/p/2132093506",
        "acceptable_formats": [
            "https://www.ebay.com/fdbk/feedback_profile/discountm36?user_context=BUYER",
            "https://www.ebay.com/itm/295531055305",
            "https://www.ebay.com/p/27011372058",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*ebay(?:\.[a-z]{2,3}){1,2})?/)?((?:itm|p|fdbk)/(?:[\w+-]+/?)+)(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "edmunds": {
        "example_url": "https://www.edmunds.com/dealerships/all/north-carolina/charlotte/VictoryChevrolet_1/",
        "acceptable_formats": [
            "VictoryChevrolet_1",
            "charlotte/VictoryChevrolet_1",
            "north-carolina/charlotte/VictoryChevrolet_1",
            "dealerships/all/north-carolina/charlotte/VictoryChevrolet_1",
            "https://www.edmunds.com/dealerships/all/north-carolina/charlotte/VictoryChevrolet_1/",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*edmunds(?:\.[a-z]{2,3}){1,2}/)?/?dealerships)?/)?all)?/)?[\w-]+)?/)?[\w-]+)?/)?([\w-]+)(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "etsy": {
        "example_url": "https://www.etsy.com/shop/MyOliveBoard",
        "acceptable_formats": [
            "MyOliveBoard",
            "shop/MyOliveBoard",
            "etsy.com/shop/MyOliveBoard",
            "https://www.etsy.com/shop/MyOliveBoard",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*etsy(?:\.[a-z]{2,3}){1,2})?/)?(?:[a-z]{2}(?:-[a-z]{2})?/)?shop)?/)?([\w-]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "expedia": {
        "example_url": "https://www.expedia.com/Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039.Hotel-Information",
        "acceptable_formats": [
            "Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039.Hotel-Information",
            "https://www.expedia.com/Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039.Hotel-Information",
            "Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039",
            "h14833039",
            "14833039",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*expedia(?:\.[a-z]{2,3}){1,2})?/)?((?:[" + NAME_CHARS + r"]+\.)?h?\d+(?:\.[" + NAME_CHARS + r"]+)?)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "facebook": {
        "example_url": "https://www.facebook.com/premiatofornocantoni",
        "acceptable_formats": [
            "premiatofornocantoni",
            "830214057037039",
            "https://www.facebook.com/premiatofornocantoni",
            "https://www.facebook.com/830214057037039",
            "https://www.facebook.com/pg/premiatofornocantoni",
            "https://www.facebook.com/pages/Sugar%20Factory/585288898581293",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*facebook(?:\.[a-z]{2,3}){1,2})?/(?:pg?/)?)?([" + LOOSE_NAME_CHARS + r"]+)(?:/\w+)*/?(?:[?#].*)?$",
            r"^(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*facebook(?:\.[a-z]{2,3}){1,2})?/)?(?:pages|people)/)?[" + LOOSE_NAME_CHARS + r"]+)?/)?(\d{14,})/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "fertility-iq": {
        "example_url": "https://www.fertilityiq.com/fertilityiq/doctors/lee-caperton",
        "acceptable_formats": [
            "doctors/lee-caperton",
            "fertilityiq/doctors/lee-caperton",
            "https://www.fertilityiq.com/fertilityiq/doctors/lee-caperton",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*fertilityiq(?:\.[a-z]{2,3}){1,2})?/)?fertilityiq)?/)?((?:clinics|doctors)/[\w-]+)(?:[?#/].*)?$",
        ],
        "lower_cased": False,
    },
    "fewo-direkt": {
        "example_url": "https://www.fewo-direkt.de/pdp/lo/1217263",
        "acceptable_formats": [
            "pdp/lo/1217263",
            "https://www.fewo-direkt.de/pdp/lo/1217263",
            "ferienwohnung-ferienhaus/p2320528vb",
            "https://www.fewo-direkt.de/ferienwohnung-ferienhaus/p2320528vb",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*fewo-direkt\.de)?/)?((?:[\w-]+/)*[a-z]{0,2}\d+[a-z]{0,2})/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "find-law": {
        "example_url": "https://lawyers.findlaw.com/florida/lighthouse-point/3411827_1/",
        "acceptable_formats": [
            "mase-seitz-briggs-NTEwMjk1N18x",
            "florida/miami/mase-seitz-briggs-NTEwMjk1N18x",
            "3411827_1",
            "https://lawyers.findlaw.com/florida/lighthouse-point/3411827_1/",
            "https://lawyers.findlaw.com/profile/lawfirm/jurewitz-law-group--injury--accident-lawyers/ca/carlsbad/NTE2MDk3MV8x",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*findlaw(?:\.[a-z]{2,3}){1,2})?/?)?[\w-]+)?/)?[\w-]+)?/)?(?:[\w-]+/){,3}([\w-]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "flipkart": {
        "example_url": "https://www.flipkart.com/panasonic-dmc-g85kgw-k-mirrorless-camera-body-14-42-mm-lens/p/itm5c5a7ee06c8b1",
        "acceptable_formats": [
            "itm5c5a7ee06c8b1",
            "p/itm5c5a7ee06c8b1",
            "panasonic-dmc-g85kgw-k-mirrorless-camera-body-14-42-mm-lens/p/itm5c5a7ee06c8b1",
            "https://www.flipkart.com/panasonic-dmc-g85kgw-k-mirrorless-camera-body-14-42-mm-lens/p/itm5c5a7ee06c8b1",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*flipkart(?:\.[a-z]{2,3}){1,2})?/)?((?:[\w-]+/)*itm\w+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "foursquare": {
        "example_url": "https://www.foursquare.com/v/bird-rock-coffee-roasters/4a947bf6f964a520bf2120e3",
        "acceptable_formats": [
            "4a947bf6f964a520bf2120e3",
            "https://www.foursquare.com/v/bird-rock-coffee-roasters/4a947bf6f964a520bf2120e3",
            "https://www.foursquare.com/4a947bf6f964a520bf2120e3",
        ],
        "patterns": [
            r"^(?:(?:https?://)?(?:[\w-]+\.)*foursquare\.com/v/(?:[" + NAME_CHARS + r"]+/)?)?([a-z\d]{24})/?(?:[?#].*)?$",
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*foursquare\.com/)?([" + NAME_CHARS + r"]+))/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "gartner": {
        "example_url": "https://www.gartner.com/reviews/market/5g-enterprise-data-services/vendor/vodafone/product/vodafone-europe-africa-india-australia-new-zealand",
        "acceptable_formats": [
            "5g-enterprise-data-services/vendor/vodafone",
            "5g-enterprise-data-services/vendor/vodafone/product/vodafone-europe-africa-india-australia-new-zealand",
            "https://www.gartner.com/reviews/market/5g-enterprise-data-services/vendor/vodafone/product/vodafone-europe-africa-india-australia-new-zealand",
            "https://www.gartner.com/reviews/market/meeting-solutions/vendor/cisco-systems",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*gartner(?:\.[a-z]{2,3}){1,2}/)?reviews)?/)?market)?/)?([\w+-]+/vendor/[\w+-]+(?:/product/[\w+-]+)?)(?:/[\w+-]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "glassdoor": {
        # E = employer page, EI_IE = overview page, RVW = reviews tab.
        "example_url": "https://www.glassdoor.com/Reviews/Tower-Health-Reviews-E1833870.htm",
        "acceptable_formats": [
            "Tower-Health-Reviews-E1833870",
            "https://www.glassdoor.com/Reviews/Tower-Health-Reviews-RVW1833870.htm",
            "https://www.glassdoor.com/Overview/Working-at-Tower-Health-EI_IE1833870.11,23.htm",
            "EI_IE1833870",
            "RVW1833870",
            "E1833870",
            "1833870",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*glassdoor(?:\.[a-z]{2,3}){1,2})?/)?[a-zA-Z]+)?/)?((?:(?:[" + NAME_CHARS + r"]+-)?(?:E|EI_IE|RVW))?\d+)(?:(?:_P\d+)?(?:\..+)*(?:\.htm(?:[?#].*)?)?)?$",
        ],
        "lower_cased": False,
    },
    "goibibo": {
        "example_url": "https://www.goibibo.com/hotels/shivam-bnb-hotel-in-goa-7731097284414613345",
        "acceptable_formats": [
            "7731097284414613345",
            "shivam-bnb-hotel-in-goa-7731097284414613345",
            "https://www.goibibo.com/hotels/shivam-bnb-hotel-in-goa-7731097284414613345",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*goibibo(?:\.[a-z]{2,3}){1,2})?/)?[\w-]+)?/)?((?:[\w()]+-)*\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "good-reads": {
        "example_url": "https://www.goodreads.com/book/show/51154652-el-sonido-de-las-olas",
        "acceptable_formats": [
            "51154652-el-sonido-de-las-olas",
            "show/51154652-el-sonido-de-las-olas",
            "book/show/51154652-el-sonido-de-las-olas",
            "https://www.goodreads.com/book/show/51154652-el-sonido-de-las-olas",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*goodreads(?:\.[a-z]{2,3}){1,2})?/)?book)?/)?show)?/)?(\d+[-\w.]*)/?[\w]*(?:/?[\w]*[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "google": {
        "example_url": "https://www.google.com/maps?cid=472717649119152494",
        "acceptable_formats": [
            "472717649119152494",
            "https://www.google.com/maps?cid=472717649119152494",
            "https://maps.google.com/maps?cid=472717649119152494",
            "ChIJx0JMBTFV2YARbgnOgjJujwY",
            "https://www.google.com/maps/place/The+Cheesecake+Factory/@32.76918,-117.1677887,17z/data=!3m1!4b1!4m5!3m4!1s0x0:0x68f6e3282ce096e!8m2!3d32.76918!4d-117.1656",
            "ChoIzsbB-eTP8MqzARoNL2cvMTFiNXZfMWdoZhAB",
            "https://www.google.com/travel/hotels/entity/ChoIzsbB-eTP8MqzARoNL2cvMTFiNXZfMWdoZhAB",
            "0x68f6e3282ce096e",
        ],
        "patterns": [
            r"^([\w-]{27})$",
            r"^(?:(?:(?:https?://)?(?:maps|www)\.)?google(?:\.[a-z]{2,3}){1,2}(?:/maps)?/?\?(?:.*&)?cid=)?(\d{17,21})(?:[#&].*)?$",
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*google(?:\.[a-z]{2,3}){1,2}/maps/place/.*/data=!.*)?!)?1s)?0x[\da-f]{1,16}:)?(0x[\da-f]{15,16}).*$",
            # Coordinates only, no place id: the URL itself is the identifier.
            r"^(?:https?://)?(?:[\w-]+\.)*google(?:\.[a-z]{2,3}){1,2}/maps/place/[" + LOOSE_NAME_CHARS + r"/]+/@-?\d+(?:\.\d+)?,-?\d+(?:\.\d+)?(?:,-?\d+(?:\.\d+)?z?)?.*$",
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*google(?:\.[a-z]{2,3}){1,2})?/)?travel)?/)?hotels)?/)?entity)?/)?([\w-]{27,45})(?:/[a-z]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "google-play": {
        "example_url": "https://play.google.com/store/apps/details?id=com.facebook.katana",
        "acceptable_formats": [
            "com.facebook.katana",
            "store/apps/details?id=com.facebook.katana",
            "https://play.google.com/store/apps/details?id=com.facebook.katana",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*play.google(?:\.[a-z]{2,3}){1,2})?/)?store)?/)?apps)?/)?details)?/?)?\?)?(?:.+&)?id=)?([\w\.]+)(?:[#].*)?$",
        ],
        "lower_cased": True,
    },
    "great-schools": {
        "example_url": "https://www.greatschools.org/california/san-diego/11109-Mt.-Everest-Academy/",
        "acceptable_formats": [
            "california/san-diego/11109-Mt.-Everest-Academy",
            "https://www.greatschools.org/california/san-diego/11109-Mt.-Everest-Academy/",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*greatschools(?:\.[a-z]{2,3}){1,2})?/)?([-\w]+/[-\w]+/\d+[-\w.]+)(?:/[-\w]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "grubhub": {
        "example_url": "https://www.grubhub.com/restaurant/22-thai-cuisine-59-nassau-st-new-york/268858/reviews",
        "acceptable_formats": [
            "268858",
            "https://www.grubhub.com/restaurant/22-thai-cuisine-59-nassau-st-new-york/268858",
            "https://www.grubhub.com/restaurant/22-thai-cuisine-59-nassau-st-new-york/268858/reviews",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*grubhub\.com)?/)?restaurant)?/)?[\da-z_-]+)?/)?(\d+)(?:/[a-z]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "healthgrades": {
        "example_url": "https://www.healthgrades.com/physician/dr-brad-cohen-2knsj",
        "acceptable_formats": [
            "2knsj",
            "dr-brad-cohen-2knsj",
            "https://www.healthgrades.com/physician/dr-brad-cohen-2knsj",
            "group-directory/ny-new-york/new-york/hudson-wellness-nyc-x8g96p",
            "https://www.healthgrades.com/group-directory/ny-new-york/new-york/hudson-wellness-nyc-x8g96p",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*healthgrades(?:\.[a-z]{2,3}){1,2})?/)?\w+)?/)?((?:\w+-)*\w+)(?:[?#].*)?$",
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*healthgrades(?:\.[a-z]{2,3}){1,2})?/)?(group-directory/[\w/-]+)(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "hotels": {
        "example_url": "https://www.hotels.com/ho141243/newcastle-gateshead-marriott-hotel-metrocentre-gateshead-united-kingdom",
        "acceptable_formats": [
            "ho141243",
            "ho141243/newcastle-gateshead-marriott-hotel-metrocentre-gateshead-united-kingdom",
            "https://www.hotels.com/ho141243/newcastle-gateshead-marriott-hotel-metrocentre-gateshead-united-kingdom",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w.-]+\.)?hotels(?:\.[a-z]{2,3}){1,2})?/)?((?:[" + NAME_CHARS + r"]+\.)?ho?\d+(?:\/[" + NAME_CHARS + r"]+)?)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "holiday-check": {
        "example_url": "https://www.holidaycheck.de/hi/hotel-metropol/5335e45d-c66d-3ab5-983c-a1f587e23ef6",
        "acceptable_formats": [
            "5335e45d-c66d-3ab5-983c-a1f587e23ef6",
            "hotel-metropol/5335e45d-c66d-3ab5-983c-a1f587e23ef6",
            "hi/hotel-metropol/5335e45d-c66d-3ab5-983c-a1f587e23ef6",
            "https://www.holidaycheck.de/hi/hotel-metropol/5335e45d-c66d-3ab5-983c-a1f587e23ef6",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*holidaycheck(?:\.[a-z]{2,3}){1,2})?/)?[-\w]+)?/)?[-\w]+)?/)?([a-f\d]{8}-[a-f\d]{4}-[a-f\d]{4}-[a-f\d]{4}-[a-f\d]{12})(?:/[-\w]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "home-advisor": {
        "example_url": "https://www.homeadvisor.com/rated.SDTechServices.116169158.html",
        "acceptable_formats": [
            "SDTechServices.116169158",
            "rated.SDTechServices.116169158.html",
            "https://www.homeadvisor.com/rated.SDTechServices.116169158.html",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*homeadvisor(?:\.[a-z]{2,3}){1,2})?/)?rated\.)?([a-z]+\.\d+)(?:\.html(?:[?#/].*)?)?$",
        ],
        "lower_cased": False,
    },
    "houzz": {
        "example_url": "https://www.houzz.com/professionals/general-contractors/greener-concepts-design-build-pfvwus-pf~2014731451",
        "acceptable_formats": [
            "https://shophouzz.com/products/modrest-prospect-modern-large-round-walnut-dining-table-prvw-vr-153460127",
            "https://www.houzz.com/professionals/flooring-contractors/national-floors-direct-inc-pfvwus-pf~378849444",
            "professionals/kitchen-and-bath-remodelers/unique-home-construction-pfvwus-pf~631257217",
            "products/modrest-prospect-modern-large-round-walnut-dining-table-prvw-vr-153460127",
            "https://www.houzz.com/professionals/general-contractors/greener-concepts-design-build-pfvwus-pf~2014731451",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*(?:shop)?houzz(?:\.[a-z]{2,3}){1,2})?/)?(?:[\w-]+/)*)?((?:professionals|products)/.+?[a-z]{2}[~-]?\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "home-stars": {
        "example_url": "https://www.homestars.com/profile/2775316-cutting-edge-landscaping-and-snowplowing",
        "acceptable_formats": [
            "/2775316-cutting-edge-landscaping-and-snowplowing",
            "/profile/2775316-cutting-edge-landscaping-and-snowplowing",
            "https://www.homestars.com/profile/2775316-cutting-edge-landscaping-and-snowplowing",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*homestars(?:\.[a-z]{2,3}){1,2})?/)?profile)?/)?([-\w]+)(?:/reviews)?/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "indeed": {
        "example_url": "https://www.indeed.com/cmp/Steadfast-Companies",
        "acceptable_formats": [
            "Steadfast-Companies",
            "https://www.indeed.com/cmp/Steadfast-Companies",
            "https://www.indeed.com/cmp/Steadfast-Companies/reviews",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*indeed\.com)?/)?cmp)?/)?([^?/#\s]+)(?:/reviews)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "influenster": {
        "example_url": "https://www.influenster.com/reviews/vicks-cool-mist-humidifier",
        "acceptable_formats": [
            "vicks-cool-mist-humidifier",
            "reviews/vicks-cool-mist-humidifier",
            "influenster.com/reviews/vicks-cool-mist-humidifier",
            "https://www.influenster.com/reviews/vicks-cool-mist-humidifier",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*influenster(?:\.[a-z]{2,3}){1,2})?/)?reviews)?/)?([-\w]+)(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "insider-pages": {
        "example_url": "https://www.insiderpages.com/profile/17639251",
        "acceptable_formats": [
            "17639251",
            "profile/17639251",
            "https://www.insiderpages.com/profile/17639251",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*insiderpages(?:\.[a-z]{2,3}){1,2})?/)?profile)?/)?(\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "just-dial": {
        "example_url": "https://www.justdial.com/Delhi/Moti-Mahal-Barbecues-Near-51-Metro-Station-Noida-Sector-51/011PXX11-XX11-240211180543-H1S7_BZDET",
        "acceptable_formats": [
            "011PXX11-XX11-240211180543-H1S7",
            "011PXX11-XX11-240211180543-H1S7_BZDET",
            "Delhi/Moti-Mahal-Barbecues-Near-51-Metro-Station-Noida-Sector-51/011PXX11-XX11-240211180543-H1S7_BZDET",
            "justdial.com/delhi/Moti-mahal-Barbecues-Near-51-Metro-Station-Noida-Sector-51/011PXX11-XX11-240211180543-H1S7_BZDET",
            "www.justdial.com/delhi/Moti-mahal-Barbecues-Near-51-Metro-Station-Noida-Sector-51/011PXX11-XX11-240211180543-H1S7_BZDET",
            "https://www.justdial.com/delhi/Moti-mahal-Barbecues-Near-51-Metro-Station-Noida-Sector-51/011PXX11-XX11-240211180543-H1S7_BZDET",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*justdial(?:\.[a-z]{2,3}){1,2})?/)?[\w-]+)?/)?[\w-]+)?/)?([a-z0-9-]+)(?:_BZDET)?(?:/?[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "just-eat": {
        "example_url": "https://www.just-eat.co.uk/restaurants-busaba-thai-dining-covent-garden-london",
        "acceptable_formats": [
            "just-eat.co.uk/restaurants-busaba-thai-dining-covent-garden-london",
            "justeat.it/restaurants-burger-pizza-milano",
            "just-eat.es/restaurants-greens-ronda-universitat-barcelona",
            "just-eat.ie/restaurants-boojum-smithfield-dublin-7",
            "just-eat.ch/it/menu/rapida-food",
            "https://www.just-eat.dk/en/menu/sehers-2-pizza-grillbar",
        ],
        "patterns": [
            r"^(?:https?://)?(?:[\w-]+\.)*(just-?eat(?:\.[a-z]{2,3}){1,2}(?:/[\w-]+)+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "kayak": {
        "example_url": "https://www.kayak.com/hotels/Skyways-Hotel,Los-Angeles-p61194-h24012-details",
        "acceptable_formats": [
            "24012",
            "Skyways-Hotel,Los-Angeles-p61194-h24012-details",
            "hotels/Skyways-Hotel,Los-Angeles-p61194-h24012-details",
            "https://www.kayak.com/hotels/Skyways-Hotel,Los-Angeles-p61194-h24012-details",
            "Los-Angeles-Hotels-Super-8-by-Wyndham-Los-Angeles.24012.ksp",
            "https://www.kayak.com/Los-Angeles-Hotels-Super-8-by-Wyndham-Los-Angeles.24012.ksp",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*kayak(?:\.[a-z]{2,3}){1,2})?/)?(?:hotels/)?([" + NAME_CHARS + r"`]*[h.]?\d+(?:-details|\.ksp)?)(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "kbb": {
        "example_url": "https://www.kbb.com/dealers/schaumburg-il/892869/zeigler-chevrolet-schaumburg/",
        "acceptable_formats": [
            "dealers/schaumburg-il/892869",
            "dealers/schaumburg-il/892869/zeigler-chevrolet-schaumburg/",
            "https://www.kbb.com/dealers/schaumburg-il/892869/zeigler-chevrolet-schaumburg/",
            "cars-for-sale/vehicle/750347196",
            "https://www.kbb.com/cars-for-sale/vehicle/750347196",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*kbb(?:\.[a-z]{2,3}){1,2})?/)?((?:cars-for-sale|dealers)/[-\w]+/\d+)(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "lawyers": {
        "example_url": "https://www.lawyers.com/laguna-beach/california/nokes-and-quinn-a-professional-corporation-111221-f/",
        "acceptable_formats": [
            "111221-f",
            "nokes-and-quinn-a-professional-corporation-111221-f",
            "https://www.lawyers.com/laguna-beach/california/nokes-and-quinn-a-professional-corporation-111221-f/",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*lawyers(?:\.[a-z]{2,3}){1,2})?/)?[\w-]+)?/)?[-\w-]+)?/)?((?:\w+-)*\d+-[af])/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "lending-tree": {
        "example_url": "https://reviews.lendingtree.com/lenders/mortgage/fifth-third-bank/72106049",
        "acceptable_formats": [
            "mortgage/fifth-third-bank/72106049",
            "lenders/mortgage/fifth-third-bank/72106049",
            "72106049",
            "https://reviews.lendingtree.com/lenders/mortgage/fifth-third-bank/72106049",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*lendingtree(?:\.[a-z]{2,3}){1,2})?/)?[\w-]+)?/)?[\w-]+)?/)?[\w-]+)?/)?(\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "lieferando": {
        "example_url": "https://www.lieferando.de/birdie-birdie-1",
        "acceptable_formats": [
            "lieferando.de/birdie-birdie-1",
            "lieferando.de/speisekarte/birdie-birdie-1",
            "lieferando.de/en/menu/birdie-birdie-1",
            "https://www.lieferando.de/birdie-birdie-1",
            "https://lieferando.de/birdie-birdie-1",
            "lieferando.at/rapida-food",
            "https://www.lieferando.at/en/menu/rapida-food",
        ],
        "patterns": [
            r"^(?:https?://)?(?:[\w-]+\.)*(lieferando\.(?:de|at)/(?:(?:[a-z]{2}/)?\w+/)?[\w-]+)(?:/?[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "lsa": {
        "example_url": "https://www.google.com/localservices/prolist?spp=Cg0vZy8xMWZzcXA3cm03",
        "acceptable_formats": [
            "Cg0vZy8xMWZzcXA3cm03",
            "https://www.google.com/localservices/prolist?spp=Cg0vZy8xMWZzcXA3cm03",
            "https://www.google.com/localservices/profile?spp=Cg0vZy8xMWZzcXA3cm03",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*(?:google\.[a-z]{2,3})?)?/)?localservices)?/)?pro(?:list|file))?\?)?(?:.+&)?spp=)?([\w=-]{20,})(?:[#&].*)?$",
        ],
        "lower_cased": False,
    },
    "make-my-trip": {
        "example_url": "https://www.makemytrip.com/hotels/hotel-details/?hotelId=201904300047376568&checkin=01019999&checkout=02019999",
        "acceptable_formats": [
            "201904300047376568",
            "hotelId=201904300047376568",
            "hotel-details/?hotelId=201904300047376568",
            "hotels/hotel-details/?hotelId=201904300047376568",
            "https://www.makemytrip.com/hotels/hotel-details/?hotelId=201904300047376568",
            "truliv_villa_macarena_best_villa_in_ecr-details-chennai",
            "truliv_villa_macarena_best_villa_in_ecr-details-chennai.html",
            "hotels/truliv_villa_macarena_best_villa_in_ecr-details-chennai.html",
            "https://www.makemytrip.com/hotels/truliv_villa_macarena_best_villa_in_ecr-details-chennai.html",
        ],
        "patterns": [
            # hotelId in the query string wins over the page name.
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*makemytrip(?:\.[a-z]{2,3}){1,2})?/)?hotels)?/)?(?:(?:hotel-details/?)?(?:[?#].*))?hotelId=(\d+).*$",
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*makemytrip(?:\.[a-z]{2,3}){1,2})?/)?hotels)?/)?([\w-]+)(?:\.html)?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "martindale": {
        "example_url": "https://www.martindale.com/organization/frenkel-frenkel-llp-1311923/",
        "acceptable_formats": [
            "attorney/david-freylikhman-158757013",
            "https://www.martindale.com/attorney/david-freylikhman-158757013",
            "organization/frenkel-frenkel-llp-1311923",
            "https://www.martindale.com/organization/frenkel-frenkel-llp-1311923/",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*martindale(?:\.[a-z]{2,3}){1,2})?/)?((?:organization|attorney)/[\w-]*\d+)(?:/[-\w]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "motability": {
        "example_url": "https://findadealer.motability.co.uk/cars/north-east/newcastle-upon-tyne/new-york-road-60937",
        "acceptable_formats": [
            "cars/north-east/newcastle-upon-tyne/new-york-road-60937",
            "https://findadealer.motability.co.uk/cars/north-east/newcastle-upon-tyne/new-york-road-60937/",
            "https://findadealer.motability.co.uk/scooters-and-powered-wheelchairs/east-midlands/alvaston/1287-london-road",
            "https://findadealer.motability.co.uk/wheelchair-accessible-vehicles/west-midlands/coventry/655-london-road",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*findadealer\.motability(?:\.[a-z]{2,3}){1,2})?/?)?((?:[\w-]+/){3}[.\w-]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "niche": {
        "example_url": "https://www.niche.com/k12/the-spence-school-new-york-ny",
        "acceptable_formats": [
            "k12/the-spence-school-new-york-ny",
            "https://www.niche.com/k12/the-spence-school-new-york-ny",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*niche(?:\.[a-z]{2,3}){1,2})?/)?([-\w]+/[-\w]+)/?(?:\w+/)?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "opentable": {
        "example_url": "https://www.opentable.com/r/the-rooftop-by-stk-san-diego",
        "acceptable_formats": [
            "r/the-rooftop-by-stk-san-diego",
            "https://www.opentable.com/r/the-rooftop-by-stk-san-diego",
            "https://www.opentable.com/bencotto-italian-kitchen",
            "bencotto-italian-kitchen",
            "https://www.opentable.com/restaurant/profile/1234567891234",
            "1234567891234",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*opentable(?:\.[a-z]{2,3}){1,2})?/)?((?:r/)?[" + NAME_CHARS + r"]+)/?(?:[?#].*)?$",
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*opentable(?:\.[a-z]{2,3}){1,2})?/restaurant/profile/)?(\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "orbitz": {
        "example_url": "https://www.orbitz.com/Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039.Hotel-Information",
        "acceptable_formats": [
            "Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039.Hotel-Information",
            "https://www.orbitz.com/Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039.Hotel-Information",
            "Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039",
            "h14833039",
            "14833039",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*orbitz(?:\.[a-z]{2,3}){1,2})?/)?((?:[" + NAME_CHARS + r"]+\.)?h?\d+(?:\.[" + NAME_CHARS + r"]+)?)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "pages-jaunes": {
        "example_url": "https://www.pagesjaunes.fr/pros/57672837",
        "acceptable_formats": [
            "57672837",
            "https://www.pagesjaunes.fr/pros/57672837",
            "https://www.pagesjaunes.fr/pros/detail?bloc_id=51362276000001C0001&no_sequence=1&code_rubrique=30101400",
            "https://www.pagesjaunes.fr/pros/detail?bloc_id=FCP57672837CLIENTDCESS000003C0001%26no_sequence=1%26code_rubrique=54053000",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*pagesjaunes\.fr)?/)?pros)?/)?(\d+)(?:/\w+)*/?(?:[?#].*)?$",
            # %26 shows up when the link was copied out of an email.
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*pagesjaunes\.fr)?/)?pros)?/)?detail\?(?:\w+=\w*(?:&|%26))*bloc_id=[a-zA-Z]*(\d{8})\w*(?:(?:&|%26)\w+=\w*)*(?:#.*)?$",
        ],
        "lower_cased": True,
    },
    "peer-spot": {
        "example_url": "https://www.peerspot.com/products/checkmarx-one-reviews",
        "acceptable_formats": [
            "checkmarx-one",
            "checkmarx-one-reviews",
            "products/checkmarx-one",
            "products/checkmarx-one-reviews",
            "https://www.peerspot.com/products/checkmarx-one",
            "https://www.peerspot.com/products/checkmarx-one-reviews",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*peerspot(?:\.[a-z]{2,3}){1,2})?/)?products)?/)?([-\w]+?)(?:-reviews)?(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "practo": {
        "example_url": "https://www.practo.com/doctor/dr-geeta-verma-gupta-dentist",
        "acceptable_formats": [
            "doctor/dr-geeta-verma-gupta-dentist",
            "https://www.practo.com/lucknow/doctor/dr-geeta-verma-gupta-dentist/recent",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*(?:practo(?:\.[a-z]{2,3}){1,2})?)?/)?[\w-]+)?/)?((?:clinic|hospital|doctor)/(?:[\w-]+))(?:[?#/].*)?$",
        ],
        "lower_cased": False,
    },
    "priceline": {
        "example_url": "https://www.priceline.com/relax/at/52129904",
        "acceptable_formats": [
            "52129904",
            "H52129904",
            "relax/at/52129904",
            "https://www.priceline.com/relax/at/52129904",
            "https://www.priceline.com/hotel-deals/en-us/P3000015284/H20018604",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*priceline(?:\.[a-z]{2,3}){1,2})?/)?(?:[\w+-]+/)*?)?H?(\d+)/?(?:[\w+-.]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "product-hunt": {
        "example_url": "https://www.producthunt.com/products/notionapps",
        "acceptable_formats": [
            "notionapps",
            "products/notionapps",
            "https://www.producthunt.com/products/notionapps",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*producthunt(?:\.[a-z]{2,3}){1,2})?/)?products)?/)?([-\w]+)/?(?:[?#/].*)?$",
        ],
        "lower_cased": False,
    },
    "product-review": {
        "example_url": "https://www.productreview.com.au/listings/lexus-rx",
        "acceptable_formats": [
            "lexus-rx",
            "listings/lexus-rx",
            "https://www.productreview.com.au/listings/lexus-rx",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*productreview(?:\.[a-z]{2,3}){1,2})?/)?listings)?/)?([-\w]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "ratemds": {
        "example_url": "https://www.ratemds.com/doctor-ratings/3178079/CHRISTINE+A.-ADAMO-Coronado-CA.html",
        "acceptable_formats": [
            "doctor-ratings/3178079/CHRISTINE+A.-ADAMO-Coronado-CA.html",
            "doctor-ratings/dr-aleena-fiorotto-huntsville-on-ca",
            "clinic/us-fl-riviera-beach-kindred-hospital-the-palm-beaches",
            "hospital/us-ca-westminster-kindred-hospital-orange-county",
            "https://www.ratemds.com/doctor-ratings/3178079/CHRISTINE+A.-ADAMO-Coronado-CA.html/",
            "https://www.ratemds.com/amp/doctor-ratings/3182039/dr-nkeiruka%20o.-dara-chicago-il.html/",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*ratemds(?:\.[a-z]{2,3}){1,2})?/)?(?:[a-z-]{3,}/)?([a-z-]{3,}/(?:\d+/[\w+.&;'-]+\.html|[\w-]+(?!/\d)))(?:[?#/].*)?$",
        ],
        "lower_cased": False,
    },
    "realself": {
        "example_url": "https://www.realself.com/dr/robert-h-cohen-beverly-hills-ca",
        "acceptable_formats": [
            "dr/robert-h-cohen-beverly-hills-ca",
            "practices/ab-plastic-surgery-seoul-south-korea",
            "https://www.realself.com/dr/robert-h-cohen-beverly-hills-ca",
            "https://www.realself.com/practices/ab-plastic-surgery-seoul-south-korea",
        ],
        "patterns": [
            r"^(?:(?:https?://)?(?:[\w-]+\.)*?realself(?:\.[a-z]{2,3}){1,2})?/?((?:(?:dr|practices)/)[-\w]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "rent": {
        "example_url": "https://www.rent.com/california/los-angeles-apartments/da-vinci-4-100050308",
        "acceptable_formats": [
            "1450-atlantic-shores-blvd-hallandale-beach-fl-lv2160399083",
            "da-vinci-4-100050308",
            "lv2160399083",
            "100050308",
            "los-angeles-apartments/da-vinci-4-100050308",
            "california/los-angeles-apartments/da-vinci-4-100050308",
            "https://www.rent.com/r/1450-atlantic-shores-blvd-hallandale-beach-fl-lv2160399083",
            "https://www.rent.com/california/los-angeles-apartments/da-vinci-4-100050308",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*rent(?:\.[a-z]{2,3}){1,2})?/)?(?:r|(?:[\w-]+(?:/[\w-]+)?)))?/)?((?:[\w-]+-)?[a-z\d]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "reseller-ratings": {
        "example_url": "https://www.resellerratings.com/store/TK_Digitals",
        "acceptable_formats": [
            "TK_Digitals",
            "https://www.resellerratings.com/store/TK_Digitals",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*resellerratings(?:\.[a-z]{2,3}){1,2})?/)?store)?/)?([-\w]+)(?:\(?:[?#/].*)?$",
        ],
        "lower_cased": False,
    },
    "reviews-io": {
        "example_url": "https://www.reviews.io/company-reviews/store/www-facegym-com",
        "acceptable_formats": [
            "io/company-reviews/store/www-facegym-com",
            "https://www.reviews.io/company-reviews/store/www-facegym-com",
            "co.uk/company-reviews/store/www-facegym-com",
            "https://www.reviews.co.uk/company-reviews/store/www-facegym-com",
            "co.uk/product-reviews/store/printstercouk/5",
            "https://www.reviews.co.uk/product-reviews/store/printstercouk/5",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*reviews)?\.)?((?:io|co\.uk)/(?:company|product)-reviews/store/[.\w-]+(?:/\d+)?)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "site-jabber": {
        "example_url": "https://www.sitejabber.com/reviews/afaa.com",
        "acceptable_formats": [
            "afaa.com",
            "reviews/afaa.com",
            "https://www.sitejabber.com/reviews/afaa.com",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*sitejabber(?:\.[a-z]{2,3}){1,2})?/)?reviews)?/)?([\w.-]+)(?:/\w+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "smyths-toys": {
        "example_url": "https://www.smythstoys.com/ie/en-ie/toys/disney/lego-disney/lego-disney-43249-lilo-and-stitch-set/p/232240",
        "acceptable_formats": [
            "232240",
            "lego-disney-43249-lilo-and-stitch-set/p/232240",
            "https://www.smythstoys.com/ie/en-ie/toys/disney/lego-disney/lego-disney-43249-lilo-and-stitch-set/p/232240",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*smythstoys(?:\.[a-z]{2,3}){1,2})?/)?ie)?/)?en-ie)?/)?(?:[\w-]+/)*)?p)?/)?(\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "software-advice": {
        "example_url": "https://www.softwareadvice.com/construction/quickmeasure-profile",
        "acceptable_formats": [
            "quickmeasure",
            "quickmeasure-profile",
            "construction/quickmeasure-profile",
            "softwareadvice.com/construction/quickmeasure-profile",
            "https://www.softwareadvice.com/construction/quickmeasure-profile",
            "https://www.softwareadvice.com/product/463789-SiteBook-Tradie",
            "https://www.softwareadvice.com.au/software/329752/pressnxpress",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*softwareadvice(?:\.[a-z]{2,3}){1,2})?/)?[\w-]+)?/)?(?:\d+/)?(?:\d*-)?([-\w]+?)(?:-profile)?(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "solv": {
        "example_url": "https://www.solvhealth.com/carbon-health-urgent-care-los-angeles-ca-goQDkV",
        "acceptable_formats": [
            "carbon-health-urgent-care-los-angeles-ca-goQDkV",
            "goQDkV",
            "https://www.solvhealth.com/carbon-health-urgent-care-los-angeles-ca-goQDkV",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*solvhealth(?:\.[a-z]{2,3}){1,2})?/)?((?:[\w-]+-)?[\w]+)(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "stayz": {
        "example_url": "https://www.stayz.com.au/pdp/lo/1217263",
        "acceptable_formats": [
            "pdp/lo/1217263",
            "https://www.stayz.com.au/pdp/lo/1217263",
            "holiday-rental/p2320528vb",
            "https://www.stayz.com.au/holiday-rental/p2320528vb",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*stayz\.com.au)?/)?((?:[\w-]+/)*[a-z]{0,2}\d+[a-z]{0,2})/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "steam": {
        "example_url": "https://store.steampowered.com/app/3016090/Eternal_Escape_castle_of_shadows/",
        "acceptable_formats": [
            "3016090",
            "3016090/Eternal_Escape_castle_of_shadows/",
            "app/3016090/Eternal_Escape_castle_of_shadows/",
            "https://store.steampowered.com/app/3016090/Eternal_Escape_castle_of_shadows/",
            "https://steamcommunity.com/app/3016090/reviews",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*(?:steampowered|steamcommunity)(?:\.[a-z]{2,3}){1,2})?/)?app)?/)?(\d+)(?:/[\w-]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "super-money": {
        "example_url": "https://www.supermoney.com/reviews/beyond-finance-llc",
        "acceptable_formats": [
            "prosper-funding-llc",
            "reviews/prosper-funding-llc",
            "https://www.supermoney.com/reviews/prosper-funding-llc",
            "https://www.supermoney.com/reviews/personal-credit-cards/prosper-card",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*supermoney(?:\.[a-z]{2,3}){1,2})?/)?reviews)?/)?(?:[-\w]+/)?([-\w]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "takeaway": {
        "example_url": "https://www.takeaway.com/bar-a-pizza-charleroi",
        "acceptable_formats": [
            "takeaway.com/be/bar-a-pizza-charleroi",
            "takeaway.com/be/menu/bar-a-pizza-charleroi",
            "https://www.takeaway.com/be/menu/bar-a-pizza-charleroi",
            "takeaway.com/lu/menu/hokkaido-sushi",
        ],
        "patterns": [
            r"^(?:https?://)?(?:[\w-]+\.)*(takeaway\.com/(?:be|lu|bg)(?:-[a-z]{2})?(?:/\w+)?/[\w-]+)(?:/?[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "talabat": {
        "example_url": "https://www.talabat.com/uae/restaurant/9372/itsu-modern-japanese-restaurant",
        "acceptable_formats": [
            "uae/itsu-modern-japanese-restaurant",
            "uae/restaurant/9372/itsu-modern-japanese-restaurant",
            "egypt/restaurant/692279",
            "https://www.talabat.com/uae/restaurant/9372/itsu-modern-japanese-restaurant",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*talabat(?:\.[a-z]{2,3}){1,2})?/)?(?:[a-z]{2}/)?([\w-]+/[\w-]+(?:/\d+(?:/[\w-]+)?)?)/?(?:[?#].*)?$",
        ],
    },
    "target": {
        "example_url": "https://www.target.com/p/women-s-short-sleeve-ribbed-t-shirt-a-new-day/-/A-93531665",
        "acceptable_formats": [
            "93531665",
            "A-93531665",
            "-/A-93531665",
            "women-s-short-sleeve-ribbed-t-shirt-a-new-day/-/A-93531665",
            "p/women-s-short-sleeve-ribbed-t-shirt-a-new-day/-/A-93531665",
            "www.target.com/p/women-s-short-sleeve-ribbed-t-shirt-a-new-day/-/A-93531665",
            "https://www.target.com/p/women-s-short-sleeve-ribbed-t-shirt-a-new-day/-/A-93531665",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*target(?:\.[a-z]{2,3}){1,2})?/)?p)?/)?((?:(?:(?:(?:(?:(?:[\w-]+)?/)?[\w-]+)?/)?\w)?-)?\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "the-fork": {
        "example_url": "https://www.thefork.com/restaurant/restaurant-the-vintage-sushi-and-more-r812024",
        "acceptable_formats": [
            "restaurant-the-vintage-sushi-and-more-r812024",
            "restaurant/restaurant-the-vintage-sushi-and-more-r812024",
            "www.thefork.com/restaurant/restaurant-the-vintage-sushi-and-more-r812024",
            "https://www.thefork.com/restaurant/restaurant-the-vintage-sushi-and-more-r812024",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*thefork\.com)/restaurant/|/?restaurant/|/?)?([\w-]+-r\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "the-knot": {
        "example_url": "https://www.theknot.com/marketplace/the-lucerne-inn-dedham-me-424229",
        "acceptable_formats": [
            "424229",
            "the-lucerne-inn-dedham-me-424229",
            "marketplace/the-lucerne-inn-dedham-me-424229",
            "theknot.com/marketplace/the-lucerne-inn-dedham-me-424229",
            "https://www.theknot.com/marketplace/the-lucerne-inn-dedham-me-424229",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*theknot(?:\.[a-z]{2,3}){1,2})?/)?marketplace)?/)?([\w.-]*\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "thuisbezorgd": {
        "example_url": "https://www.thuisbezorgd.nl/mana-mana-de-pijp",
        "acceptable_formats": [
            "thuisbezorgd.nl/namche",
            "thuisbezorgd.nl/menu/namche",
            "https://www.thuisbezorgd.nl/namche",
            "https://www.thuisbezorgd.nl/boodschappen/rembrandtpark-shop",
        ],
        "patterns": [
            r"^(?:https?://)?(?:[\w-]+\.)*(thuisbezorgd\.nl/(?:(?:[a-z]{2}/)?\w+/)?[\w-]+)(?:/?[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "thumbtack": {
        "example_url": "https://www.thumbtack.com/ca/san-jose/interior-designers/inside-eye-design-studio/service/501014977851047937",
        "acceptable_formats": [
            "inside-eye-design-studio/service/501014977851047937",
            "501014977851047937",
            "ca/san-jose/interior-designers/inside-eye-design-studio/service/501014977851047937",
            "https://www.thumbtack.com/ca/san-jose/interior-designers/inside-eye-design-studio/service/501014977851047937",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*thumbtack(?:\.[a-z]{2,3}){1,2})?/)?[\w-]+)?/)?[\w-]+)?/)?[\w-]+)?/)?((?:(?:(?:(?:[\w-]+)?/)?service)?/)?\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "travelocity": {
        "example_url": "https://www.travelocity.com/Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039.Hotel-Information",
        "acceptable_formats": [
            "Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039.Hotel-Information",
            "https://www.travelocity.com/Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039.Hotel-Information",
            "Worcester-Hotels-Hilton-Garden-Inn-BostonMarlborough.h14833039",
            "h14833039",
            "14833039",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*travelocity(?:\.[a-z]{2,3}){1,2})?/)?((?:[" + NAME_CHARS + r"]+\.)?h?\d+(?:\.[" + NAME_CHARS + r"]+)?)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "treat-well": {
        "example_url": "https://www.treatwell.fr/salon/le-secret-du-barbier",
        "acceptable_formats": [
            "treatwell.fr/salon/le-secret-du-barbier",
            "https://www.treatwell.fr/salon/le-secret-du-barbier",
            "treatwell.co.uk/place/le-secret-du-barbier",
            "treatwell.lt/salonas/masazo-terapeutas-mikolajus",
            "treatwell.be/salon/kapsalon-c-hair",
            "treatwell.de/ort/barberremz",
            "treatwell.es/establecimiento/la-estetica-fransuar",
            "treatwell.gr/katasthma/mr-lenorman",
            "treatwell.ie/place/organic-keratin-powered-by-zoneabeautyrepublik",
            "treatwell.it/salone/alezon-salon-hair-couture",
            "treatwell.nl/salon/barbershop1059",
            "treatwell.at/ort/cut2be-1",
            "treatwell.pt/estabelecimento/barbearia1025",
            "treatwell.ch/ort/art-of-beauty-11",
            "treatwell.ch/fr/salon/art-of-beauty-11",
        ],
        "patterns": [
            r"^(?:https?://)?(?:[\w-]+\.)*(treatwell(?:\.[a-z]{2,3}){1,2}(?:/[A-Z]{2})?/[a-z]+/[" + NAME_CHARS + r"]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "trip": {
        "example_url": "https://www.trip.com/hotels/tunis-hotel-detail-78988468",
        "acceptable_formats": [
            "78988468",
            "https://www.trip.com/hotels/tunis-hotel-detail-78988468",
            "hotelId=78988468",
            "https://us.trip.com/hotels/detail/?hotelId=78988468",
            "https://us.trip.com/things-to-do/detail/69614885",
            "things-to-do/detail/69614885",
            "detail/69614885",
            "https://www.trip.com/travel-guide/attraction/hong-kong/ocean-park-hong-kong-10558616",
            "attraction/hong-kong/ocean-park-hong-kong-10558616",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*trip(?:\.[a-z]{2,3}){1,2})?/)?travel-guide)?/)?(attraction/[\w-]+/[\w-]+-\d+)/?(?:[?#].*)?$",
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*trip(?:\.[a-z]{2,3}){1,2})?/)?things-to-do)?/)?(detail/\d+)/?(?:[?#].*)?$",
            r"^(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*trip(?:\.[a-z]{2,3}){1,2})?/)?hotels)?/)?detail)?/)?\?.*)?(hotelId=\d+).*$",
            r"^(?:(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*trip(?:\.[a-z]{2,3}){1,2})?/)?hotels)?/)?[\w-]+-)?detail)?-)?(\d+)(?:/[\w-]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "tripadvisor": {
        "example_url": "https://www.tripadvisor.com/Restaurant_Review-g53957-d4838236-Reviews-Top_of_the_80_s-West_Hazleton_Luzerne_County_Pocono_Mountains_Region_Pennsylvania.html",
        "acceptable_formats": [
            "g53957-d4838236",
            "https://www.tripadvisor.com/Restaurant_Review-g53957-d4838236-Reviews-Top_of_the_80_s-West_Hazleton_Luzerne_County_Pocono_Mountains_Region_Pennsylvania.html",
            "Restaurant_Review-g53957-d4838236-Reviews-Top_of_the_80_s-West_Hazleton_Luzerne_County_Pocono_Mountains_Region_Pennsylvania.html",
            "d4838236",
            "4838236",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*tripadvisor(?:\.[a-z]{2,3}){1,2})?/)?\w+review-)?(g\d+-d\d+)(?:-[\w-]+\.html/?(?:[?#].*)?)?$",
            r"^(?:\w+review-)?(g\d+-d\d+)(?:-reviews-[\w-]+(?:\.html/?(?:[?#].*)?)?)?$",
            r"^(?:g\d+-)?d?(\d+)$",
        ],
        "lower_cased": True,
    },
    "trusted-shops": {
        "example_url": "https://www.trstd.com/nl-nl/reviews/feestwinkel-nl",
        "acceptable_formats": [
            "de/bewertung/info_X16AE36093C7AABEB598B22D499FE2D1D",
            "https://www.trustedshops.de/bewertung/info_X16AE36093C7AABEB598B22D499FE2D1D",
            "com/nl-nl/reviews/feestwinkel-nl",
            "https://www.trstd.com/nl-nl/reviews/feestwinkel-nl",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*(?:trustedshops|trstd))?\.)?([a-z]{2,3}(?:\.[a-z]{2,3})?/(?:[a-z]{2}-[a-z]{2}/)?[-\w]+/[-\w.]+?)(?:\.html)?/?(?:[?#].*)?$",
        ],
    },
    "trustpilot": {
        "example_url": "https://www.trustpilot.com/review/trustpilot.com",
        "acceptable_formats": [
            "trustpilot.com",
            "https://www.trustpilot.fr/review/trustpilot.com",
            "https://fr.trustpilot.com/review/trustpilot.com",
            "trustpilot.com/review/www.trustpilot.com",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*trustpilot(?:\.[a-z]{2,3}){1,2})?/review/)?([\w.-]+(?:/(?!transparency\b)\w+)*)(?:/transparency)?/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "trust-radius": {
        "example_url": "https://www.trustradius.com/products/clari",
        "acceptable_formats": [
            "clari",
            "clari/reviews",
            "products/clari",
            "products/clari/reviews",
            "trustradius.com/products/clari",
            "www.trustradius.com/products/clari/reviews",
            "https://www.trustradius.com/products/clari",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*trustradius(?:\.[a-z]{2,3}){1,2})?/)?products)?/)?([-\w]+)(?:/[\w-]+)*/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "ubereats": {
        "example_url": "https://www.ubereats.com/store/kfc-2400-louis-xiv/YexrviO9V_GNGHXnEojF2A",
        "acceptable_formats": [
            "kfc-2400-louis-xiv/YexrviO9V_GNGHXnEojF2A",
            "YexrviO9V_GNGHXnEojF2A",
            "https://www.ubereats.com/store/kfc-2400-louis-xiv/YexrviO9V_GNGHXnEojF2A",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*ubereats(?:\.[a-z]{2,3}){1,2})?/)?(?:[a-z]{2}(?:-[a-z]{2})?/)?store)?/)?(?:[\w–:&+!-]+))?/)?([\w-]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "vitals": {
        "example_url": "https://www.vitals.com/doctors/Dr_Mickey_Coffler.html",
        "acceptable_formats": [
            "doctors/Dr_Mickey_Coffler",
            "doctors/1x5p6w/natalie-jay",
            "https://www.vitals.com/doctors/Dr_Mickey_Coffler.html",
            "https://www.vitals.com/dentists/Dr_Susan_Vivien_Chadkewicz",
            "https://www.vitals.com/practice/wills-eye-surgery-center-352fc2c7-4703-e211-a42b-001f29e3eb44",
            "https://www.vitals.com/hospital/martin-luther-king-jr-community-hospital-9b26e520-e191-456a-934a-3c008ad2fd48",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*vitals(?:\.[a-z]{2,3}){1,2})?/)?((?:[a-z]+)(?:/[0-9a-z]{6})?/[\w-]+)(?:\.html)?(?:[?#/].*)?$",
        ],
        "lower_cased": False,
    },
    "vrbo": {
        "example_url": "https://www.vrbo.com/pdp/lo/1217263",
        "acceptable_formats": [
            "2937459",
            "https://www.vrbo.com/2937459",
            "pdp/lo/1217263",
            "https://www.vrbo.com/pdp/lo/1217263",
            "en-sg/p1469363a",
            "https://www.vrbo.com/en-sg/p1469363a",
            "en-ca/cottage-rental/p2320528vb",
            "https://www.vrbo.com/en-ca/cottage-rental/p2320528vb",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*vrbo\.com)?/)?((?:[\w-]+/)*[a-z]{0,2}\d+[a-z]{0,2})/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "walmart": {
        "example_url": "https://www.walmart.com/ip/232XL-Ink-Cartridges-Epson-232XL-232-T232-Ink-Workforce-WF-2930-WF-2950-Expression-XP-4200-XP-4205-Printer-Black-Cyan-Magenta-Yellow-5-Pack/5112777712",
        "acceptable_formats": [
            "5112777712",
            "232XL-Ink-Cartridges-Epson-232XL-232-T232-Ink-Workforce-WF-2930-WF-2950-Expression-XP-4200-XP-4205-Printer-Black-Cyan-Magenta-Yellow-5-Pack/5112777712",
            "ip/232XL-Ink-Cartridges-Epson-232XL-232-T232-Ink-Workforce-WF-2930-WF-2950-Expression-XP-4200-XP-4205-Printer-Black-Cyan-Magenta-Yellow-5-Pack/5112777712",
            "https://www.walmart.com/ip/232XL-Ink-Cartridges-Epson-232XL-232-T232-Ink-Workforce-WF-2930-WF-2950-Expression-XP-4200-XP-4205-Printer-Black-Cyan-Magenta-Yellow-5-Pack/5112777712",
        ],
        "patterns": [
            r"^(?:(?:https?://)?(?:[\w-]+.)?walmart\.[a-z]{2,})?(?:/?(?:(?:ip|product|reviews/product)/)?(?:[\w-]+/)*)?(\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "webmd": {
        "example_url": "https://doctor.webmd.com/doctor/semira-bayati-13f92f7f-cc8d-419f-8bbc-1b44c77c6d89",
        "acceptable_formats": [
            "doctor/semira-bayati-13f92f7f-cc8d-419f-8bbc-1b44c77c6d89",
            "practice/roxana-r-sayah-dds-4a8eeb83-c7ea-4e1c-8d5b-0c1cca371576",
            "hospital/college-hospital-cerritos-33866415-4e22-4424-af80-79c842223748",
            "https://doctor.webmd.com/doctor/semira-bayati-13f92f7f-cc8d-419f-8bbc-1b44c77c6d89",
            "https://doctor.webmd.com/doctor/semira-bayati-13f92f7f-cc8d-419f-8bbc-1b44c77c6d89-overview",
            "https://doctor.webmd.com/doctor/semira-bayati-13f92f7f-cc8d-419f-8bbc-1b44c77c6d89/reviews",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?doctor\.webmd(?:\.[a-z]{2,3}){1,2})?/)?((?:doctor|practice|hospital)/(?:\w+-)+[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12})(?:-[a-z]+)?(?:[?#/].*)?$",
        ],
        "lower_cased": False,
    },
    "wedding-wire": {
        "example_url": "https://www.weddingwire.com/biz/north-shore-house/28b3e0f05b36bce3.html",
        "acceptable_formats": [
            "weddingwire.com/28b3e0f05b36bce3",
            "weddingwire.com/biz/north-shore-house/28b3e0f05b36bce3.html",
            "https://www.weddingwire.com/biz/north-shore-house/28b3e0f05b36bce3.html",
            "https://www.weddingwire.ca/wedding-banquet-halls/the-doctors-house--e10815",
            "https://www.weddingwire.in/wedding-lawns-farmhouses/rajkamal-palace--e477932",
        ],
        "patterns": [
            r"^(?:https?://)?(?:[\w-]+\.)*weddingwire(?:\.[a-z]{2,3}){1,2}/(?:[\w-]+/)?(?:[\w-]+/)?([&\w-]+)(?:\.html)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "yell": {
        "example_url": "https://www.yell.com/biz/andreas-pizzeria-bedford-1889996",
        "acceptable_formats": [
            "andreas-pizzeria-bedford-1889996",
            "biz/andreas-pizzeria-bedford-1889996",
            "yell.com/biz/andreas-pizzeria-bedford-1889996",
            "https://www.yell.com/biz/andreas-pizzeria-bedford-1889996",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*yell(?:\.[a-z]{2,3}){1,2})?/)?biz)?/)?([\w-]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "yellowpages": {
        "example_url": "https://www.yellowpages.com/houston-tx/mip/the-auto-doc-8519899",
        "acceptable_formats": [
            "the-auto-doc-8519899",
            "https://www.yellowpages.com/houston-tx/mip/the-auto-doc-8519899",
            "https://www.yellowpages.com/houston-tx/l/8519899",
            "houston-tx/mip/the-auto-doc-8519899",
            "8519899",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*yellowpages\.com)?/)?(?:[" + NAME_CHARS + r"]+/(?:mip|bp)/|(?:[" + NAME_CHARS + r"]+/)?l/))?((?:[" + NAME_CHARS + r"]+-)?\d+)/?(?:[?#].*)?$",
        ],
        "lower_cased": True,
    },
    "yelp": {
        "example_url": "https://www.yelp.com/biz/the-cheesecake-factory-san-diego",
        "acceptable_formats": [
            "the-cheesecake-factory-san-diego",
            "https://www.yelp.com/biz/the-cheesecake-factory-san-diego",
        ],
        "patterns": [
            r"^(?:(?:https?://)?(?:[\w-]+\.)*yelp(?:\.[a-z]{2,3}){1,2}/biz/)?([" + NAME_CHARS + r"]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "zillow": {
        "example_url": "https://www.zillow.com/profile/oakandocean",
        "acceptable_formats": [
            "oakandocean",
            "https://www.zillow.com/profile/oakandocean",
            "https://www.zillow.com/lender-profile/LenderGreg",
        ],
        "patterns": [
            r"^(?:(?:(?:(?:(?:https?://)?(?:[\w-]+\.)*zillow(?:\.[a-z]{2,3}){1,2})?/)?(?:lender-)?profile)?/)?([-\w \t]+)/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
    "zocdoc": {
        "example_url": "https://www.zocdoc.com/doctor/leslie-lu-md-339006",
        "acceptable_formats": [
            "leslie-lu-md-339006",
            "339006",
            "doctor/leslie-lu-md-339006",
            "https://www.zocdoc.com/doctor/leslie-lu-md-339006",
            "https://www.zocdoc.com/dentist/leslie-lu-md-339006",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*zocdoc(?:\.[a-z]{2,3}){1,2})?/)?((?:[a-z]+/)?(?:\w+-)*\d+)(?:[?#/].*)?$",
        ],
        "lower_cased": False,
    },
    "zomato": {
        "example_url": "https://www.zomato.com/abudhabi/payyannur-restaurant-1-al-markaziya/reviews",
        "acceptable_formats": [
            "abudhabi/payyannur-restaurant-1-al-markaziya",
            "https://www.zomato.com/abudhabi/payyannur-restaurant-1-al-markaziya/reviews",
            "https://www.zomato.com/tr/abudhabi/payyannur-restaurant-1-al-markaziya/reviews",
        ],
        "patterns": [
            r"^(?:(?:(?:https?://)?(?:[\w-]+\.)*zomato\.com)?/)?(?:[a-z]{2}/)?([\w-]+/[\w-]+)(?:/[a-z]+)?/?(?:[?#].*)?$",
        ],
        "lower_cased": False,
    },
}
