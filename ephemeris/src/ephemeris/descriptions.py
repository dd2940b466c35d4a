"""Multilingual description text for Mercury status, Moon phases, and transits."""

from __future__ import annotations

from ephemeris.errors import UnknownDescriptionError

LANGUAGES = ("en", "es", "fr", "pt", "it", "de")

MERCURY_DESCRIPTIONS: dict[str, dict[str, str]] = {
    "retrograde": {
        "en": "Mercury is currently retrograde, a time when communication, technology, and travel may face disruptions. Review, revise, and be patient with delays. Avoid signing major contracts if possible.",
        "es": "Mercurio está actualmente retrógrado, un momento en que la comunicación, la tecnología y los viajes pueden enfrentar interrupciones. Revise, corrija y sea paciente con los retrasos. Evite firmar contratos importantes si es posible.",
        "fr": "Mercure est actuellement rétrograde, une période où la communication, la technologie et les voyages peuvent faire face à des perturbations. Révisez, corrigez et soyez patient avec les retards. Évitez de signer des contrats majeurs si possible.",
        "pt": "Mercúrio está atualmente retrógrado, um momento em que comunicação, tecnologia e viagens podem enfrentar interrupções. Revise, corrija e seja paciente com atrasos. Evite assinar contratos importantes se possível.",
        "it": "Mercurio è attualmente retrogrado, un momento in cui comunicazione, tecnologia e viaggi possono affrontare interruzioni. Rivedi, correggi e sii paziente con i ritardi. Evita di firmare contratti importanti se possibile.",
        "de": "Merkur ist derzeit rückläufig, eine Zeit, in der Kommunikation, Technologie und Reisen Störungen unterliegen können. Überprüfen, überarbeiten und seien Sie geduldig mit Verzögerungen. Vermeiden Sie wenn möglich wichtige Vertragsunterzeichnungen.",
    },
    "direct": {
        "en": "Mercury is direct and moving forward smoothly. This is a favorable time for communication, contracts, technology purchases, and travel plans. Express yourself clearly and make important decisions with confidence.",
        "es": "Mercurio está directo y avanzando sin problemas. Este es un momento favorable para la comunicación, contratos, compras de tecnología y planes de viaje. Exprésese claramente y tome decisiones importantes con confianza.",
        "fr": "Mercure est direct et avance en douceur. C'est une période favorable pour la communication, les contrats, les achats technologiques et les projets de voyage. Exprimez-vous clairement et prenez des décisions importantes avec confiance.",
        "pt": "Mercúrio está direto e avançando suavemente. Este é um momento favorável para comunicação, contratos, compras de tecnologia e planos de viagem. Expresse-se claramente e tome decisões importantes com confiança.",
        "it": "Mercurio è diretto e si muove in avanti senza problemi. Questo è un momento favorevole per la comunicazione, i contratti, gli acquisti tecnologici e i piani di viaggio. Esprimetevi chiaramente e prendete decisioni importanti con fiducia.",
        "de": "Merkur ist direktläufig und bewegt sich reibungslos vorwärts. Dies ist eine günstige Zeit für Kommunikation, Verträge, Technologiekäufe und Reisepläne. Drücken Sie sich klar aus und treffen Sie wichtige Entscheidungen mit Zuversicht.",
    },
    "pre_shadow": {
        "en": "Mercury is in pre-retrograde shadow. You may begin to feel the retrograde effects. Back up important data, double-check communications, and prepare for potential delays in the coming weeks.",
        "es": "Mercurio está en sombra pre-retrógrada. Puede comenzar a sentir los efectos retrógrados. Haga copias de seguridad de datos importantes, verifique las comunicaciones dos veces y prepárese para posibles retrasos en las próximas semanas.",
        "fr": "Mercure est dans l'ombre pré-rétrograde. Vous pouvez commencer à ressentir les effets rétrogrades. Sauvegardez les données importantes, vérifiez deux fois les communications et préparez-vous à d'éventuels retards dans les semaines à venir.",
        "pt": "Mercúrio está na sombra pré-retrógrada. Você pode começar a sentir os efeitos retrógrados. Faça backup de dados importantes, verifique as comunicações duas vezes e prepare-se para possíveis atrasos nas próximas semanas.",
        "it": "Mercurio è nell'ombra pre-retrograda. Potresti iniziare a sentire gli effetti retrogradi. Esegui il backup dei dati importanti, ricontrolla le comunicazioni e preparati a possibili ritardi nelle prossime settimane.",
        "de": "Merkur ist im Vor-Rückläufigkeits-Schatten. Sie können beginnen, die rückläufigen Effekte zu spüren. Sichern Sie wichtige Daten, überprüfen Sie Kommunikationen doppelt und bereiten Sie sich auf mögliche Verzögerungen in den kommenden Wochen vor.",
    },
    "post_shadow": {
        "en": "Mercury is in post-retrograde shadow. The retrograde effects are gradually clearing, but remain cautious with communication and contracts. Review lessons learned during the retrograde period.",
        "es": "Mercurio está en sombra post-retrógrada. Los efectos retrógrados se están aclarando gradualmente, pero manténgase cauteloso con la comunicación y los contratos. Revise las lecciones aprendidas durante el período retrógrado.",
        "fr": "Mercure est dans l'ombre post-rétrograde. Les effets rétrogrades se dissipent progressivement, mais restez prudent avec la communication et les contrats. Passez en revue les leçons apprises pendant la période rétrograde.",
        "pt": "Mercúrio está na sombra pós-retrógrada. Os efeitos retrógrados estão gradualmente se dissipando, mas permaneça cauteloso com comunicação e contratos. Revise as lições aprendidas durante o período retrógrado.",
        "it": "Mercurio è nell'ombra post-retrograda. Gli effetti retrogradi stanno gradualmente scomparendo, ma rimani cauto con la comunicazione e i contratti. Rivedi le lezioni apprese durante il periodo retrogrado.",
        "de": "Merkur ist im Nach-Rückläufigkeits-Schatten. Die rückläufigen Effekte klären sich allmählich, bleiben Sie jedoch vorsichtig mit Kommunikation und Verträgen. Überprüfen Sie die während der Rückläufigkeitsperiode gelernten Lektionen.",
    },
}

MOON_PHASE_DESCRIPTIONS: dict[str, dict[str, str]] = {
    "new_moon": {
        "en": "The New Moon brings fresh beginnings and new intentions. This is a powerful time to set goals and plant seeds for future growth.",
        "es": "La Luna Nueva trae nuevos comienzos e intenciones frescas. Es un momento poderoso para establecer metas y plantar semillas para el crecimiento futuro.",
        "fr": "La Nouvelle Lune apporte de nouveaux départs et de nouvelles intentions. C'est un moment puissant pour fixer des objectifs et planter des graines pour la croissance future.",
        "pt": "A Lua Nova traz novos começos e novas intenções. Este é um momento poderoso para estabelecer metas e plantar sementes para o crescimento futuro.",
        "it": "La Luna Nuova porta nuovi inizi e nuove intenzioni. Questo è un momento potente per stabilire obiettivi e piantare semi per la crescita futura.",
        "de": "Der Neumond bringt neue Anfänge und frische Absichten. Dies ist eine kraftvolle Zeit, um Ziele zu setzen und Samen für zukünftiges Wachstum zu pflanzen.",
    },
    "waxing_crescent": {
        "en": "The Waxing Crescent Moon encourages action on your intentions. Take small steps toward your goals with growing confidence.",
        "es": "La Luna Creciente Creciente fomenta la acción sobre sus intenciones. Dé pequeños pasos hacia sus metas con creciente confianza.",
        "fr": "Le Croissant de Lune Croissant encourage l'action sur vos intentions. Faites de petits pas vers vos objectifs avec une confiance croissante.",
        "pt": "A Lua Crescente Crescente encoraja a ação sobre suas intenções. Dê pequenos passos em direção aos seus objetivos com crescente confiança.",
        "it": "La Luna Crescente Crescente incoraggia l'azione sulle tue intenzioni. Fai piccoli passi verso i tuoi obiettivi con crescente fiducia.",
        "de": "Der zunehmende Sichelmond ermutigt zum Handeln bei Ihren Absichten. Machen Sie kleine Schritte zu Ihren Zielen mit wachsendem Vertrauen.",
    },
    "first_quarter": {
        "en": "The First Quarter Moon calls for decisive action. Overcome obstacles and push through challenges with determination.",
        "es": "La Luna del Primer Cuarto llama a la acción decisiva. Supere obstáculos y supere desafíos con determinación.",
        "fr": "Le Premier Quartier de Lune appelle à l'action décisive. Surmontez les obstacles et poussez à travers les défis avec détermination.",
        "pt": "A Lua do Primeiro Quarto pede ação decisiva. Supere obstáculos e supere desafios com determinação.",
        "it": "Il Primo Quarto di Luna richiede un'azione decisiva. Supera gli ostacoli e affronta le sfide con determinazione.",
        "de": "Das Erste Viertel des Mondes fordert entschlossenes Handeln. Überwinden Sie Hindernisse und meistern Sie Herausforderungen mit Entschlossenheit.",
    },
    "waxing_gibbous": {
        "en": "The Waxing Gibbous Moon is a time for refinement and adjustment. Fine-tune your plans as manifestation approaches.",
        "es": "La Luna Gibosa Creciente es un momento de refinamiento y ajuste. Afine sus planes a medida que se acerca la manifestación.",
        "fr": "La Lune Gibbeuse Croissante est un temps de raffinement et d'ajustement. Affinez vos plans à mesure que la manifestation approche.",
        "pt": "A Lua Gibosa Crescente é um momento de refinamento e ajuste. Ajuste seus planos à medida que a manifestação se aproxima.",
        "it": "La Luna Gibbosa Crescente è un tempo di raffinamento e aggiustamento. Affina i tuoi piani mentre la manifestazione si avvicina.",
        "de": "Der zunehmende Gibbous-Mond ist eine Zeit der Verfeinerung und Anpassung. Verfeinern Sie Ihre Pläne, während sich die Manifestation nähert.",
    },
    "full_moon": {
        "en": "The Full Moon illuminates everything, bringing clarity and culmination. This is a time of completion, celebration, and release.",
        "es": "La Luna Llena ilumina todo, trayendo claridad y culminación. Este es un momento de finalización, celebración y liberación.",
        "fr": "La Pleine Lune illumine tout, apportant clarté et culmination. C'est un temps d'achèvement, de célébration et de libération.",
        "pt": "A Lua Cheia ilumina tudo, trazendo clareza e culminação. Este é um momento de conclusão, celebração e liberação.",
        "it": "La Luna Piena illumina tutto, portando chiarezza e culminazione. Questo è un tempo di completamento, celebrazione e rilascio.",
        "de": "Der Vollmond beleuchtet alles und bringt Klarheit und Höhepunkt. Dies ist eine Zeit des Abschlusses, der Feier und der Befreiung.",
    },
    "waning_gibbous": {
        "en": "The Waning Gibbous Moon encourages gratitude and sharing. Share your wisdom and give back to your community.",
        "es": "La Luna Gibosa Menguante fomenta la gratitud y el compartir. Comparta su sabiduría y devuelva a su comunidad.",
        "fr": "La Lune Gibbeuse Décroissante encourage la gratitude et le partage. Partagez votre sagesse et redonnez à votre communauté.",
        "pt": "A Lua Gibosa Minguante encoraja a gratidão e o compartilhamento. Compartilhe sua sabedoria e retribua à sua comunidade.",
        "it": "La Luna Gibbosa Calante incoraggia la gratitudine e la condivisione. Condividi la tua saggezza e restituisci alla tua comunità.",
        "de": "Der abnehmende Gibbous-Mond ermutigt zu Dankbarkeit und Teilen. Teilen Sie Ihre Weisheit und geben Sie Ihrer Gemeinschaft zurück.",
    },
    "last_quarter": {
        "en": "The Last Quarter Moon is a time for release and forgiveness. Let go of what no longer serves you.",
        "es": "La Luna del Último Cuarto es un momento de liberación y perdón. Suelte lo que ya no le sirve.",
        "fr": "Le Dernier Quartier de Lune est un temps de libération et de pardon. Lâchez ce qui ne vous sert plus.",
        "pt": "A Lua do Último Quarto é um momento de liberação e perdão. Deixe ir o que não mais lhe serve.",
        "it": "L'Ultimo Quarto di Luna è un tempo di rilascio e perdono. Lascia andare ciò che non ti serve più.",
        "de": "Das Letzte Viertel des Mondes ist eine Zeit der Befreiung und Vergebung. Lassen Sie los, was Ihnen nicht mehr dient.",
    },
    "waning_crescent": {
        "en": "The Waning Crescent Moon invites rest and introspection. Prepare for the next cycle with quiet contemplation.",
        "es": "La Luna Menguante Menguante invita al descanso y la introspección. Prepárese para el próximo ciclo con contemplación tranquila.",
        "fr": "Le Croissant de Lune Décroissant invite au repos et à l'introspection. Préparez-vous pour le prochain cycle avec une contemplation tranquille.",
        "pt": "A Lua Minguante Minguante convida ao descanso e à introspecção. Prepare-se para o próximo ciclo com contemplação tranquila.",
        "it": "La Luna Calante Calante invita al riposo e all'introspezione. Preparati per il prossimo ciclo con contemplazione tranquilla.",
        "de": "Der abnehmende Sichelmond lädt zur Ruhe und Selbstreflexion ein. Bereiten Sie sich auf den nächsten Zyklus mit stiller Kontemplation vor.",
    },
}

TRANSIT_DESCRIPTIONS: dict[str, str] = {
    "en": "The planetary transits shape the cosmic energies affecting all zodiac signs. Pay attention to aspects between your natal planets and current transits for personalized insights.",
    "es": "Los tránsitos planetarios dan forma a las energías cósmicas que afectan a todos los signos del zodíaco. Preste atención a los aspectos entre sus planetas natales y los tránsitos actuales para obtener información personalizada.",
    "fr": "Les transits planétaires façonnent les énergies cosmiques affectant tous les signes du zodiaque. Faites attention aux aspects entre vos planètes natales et les transits actuels pour des aperçus personnalisés.",
    "pt": "Os trânsitos planetários moldam as energias cósmicas que afetam todos os signos do zodíaco. Preste atenção aos aspectos entre seus planetas natais e os trânsitos atuais para insights personalizados.",
    "it": "I transiti planetari modellano le energie cosmiche che influenzano tutti i segni zodiacali. Presta attenzione agli aspetti tra i tuoi pianeti natali e i transiti attuali per approfondimenti personalizzati.",
    "de": "Die Planetentransite formen die kosmischen Energien, die alle Sternzeichen beeinflussen. Achten Sie auf Aspekte zwischen Ihren Geburtsplaneten und aktuellen Transiten für personalisierte Einblicke.",
}


def _lookup(table: dict[str, dict[str, str]], key: str, kind: str) -> dict[str, str]:
    try:
        return dict(table[key])
    except KeyError:
        raise UnknownDescriptionError(f"No {kind} description for '{key}'") from None


def mercury_description(status: str) -> dict[str, str]:
    """Language code -> text for a Mercury status."""
    return _lookup(MERCURY_DESCRIPTIONS, status, "Mercury status")


def moon_phase_description(phase: str) -> dict[str, str]:
    """Language code -> text for a named Moon phase."""
    return _lookup(MOON_PHASE_DESCRIPTIONS, phase, "Moon phase")


def transit_description() -> dict[str, str]:
    return dict(TRANSIT_DESCRIPTIONS)
