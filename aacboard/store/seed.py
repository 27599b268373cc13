"""
Built-in catalog seed.

Six categories with their bilingual cards, loaded into every new store.
Card display orders follow list position, starting at 1.
"""

from typing import TYPE_CHECKING

from aacboard.models.catalog import CardCreate, CategoryCreate

if TYPE_CHECKING:
    from aacboard.store.catalog import CatalogStore

# ruff: noqa: E501

EXPRESSIONS_CARDS: list[tuple[str, str, str]] = [
    ("It hurts", "Está doendo", "https://telemedicinamorsch.com.br/wp-content/uploads/2021/05/dor-de-cabeca.jpeg"),
    ("It's good", "Está bom", "https://img.freepik.com/fotos-gratis/mulher-jovem-impressionada-mostrando-os-polegares-para-cima-e-sorrindo-maravilhada-elogiando-algo-legal-em-pe-sobre-uma-parede-branca_176420-37535.jpg?semt=ais_hybrid&w=740"),
    ("I don't like it", "Não gosto", "https://images.unsplash.com/photo-1693168058063-f8e3474ce214?w=200&h=200&fit=crop"),
    ("I want to change", "Quero mudar", "https://i.pinimg.com/736x/50/a4/2c/50a42c0a969d3d5a6cc04e12ce1b4dd0.jpg"),
    ("Can you repeat?", "Pode repetir?", "https://img.freepik.com/vetores-gratis/ilustracao-de-encolher-de-ombros-desenhada-de-mao_23-2149318020.jpg?semt=ais_hybrid&w=740"),
    ("Where is it?", "Onde está?", "https://i.pinimg.com/736x/d1/5d/4b/d15d4b0cadaa8f6784a44717a6394095.jpg"),
    ("I need help", "Preciso de ajuda", "https://images.unsplash.com/photo-1544027993-37dbfe43562a?w=200&h=200&fit=crop"),
    ("I don't understand", "Não entendi", "https://cdn.wizard.com.br/wp-content/uploads/2023/05/04152207/palavra-do-ano-768x432.jpg"),
    ("It's difficult", "Está difícil", "https://images.unsplash.com/photo-1560785496-3c9d27877182?w=200&h=200&fit=crop"),
    ("I want to stop", "Quero parar", "https://img.freepik.com/fotos-gratis/menina-linda-em-um-casaco-cinza-olhando-para-a-camera-com-uma-expressao-desagradavel-fazendo-gesto-de-parar-em-pe-sobre-um-fundo-branco_141793-24329.jpg?semt=ais_hybrid&w=740"),
    ("I want to play", "Quero brincar", "https://aventurasmaternas.com.br/wp-content/uploads/2015/03/brincadeiras-tradicionais-encantam-a-garotada1.jpg"),
    ("I'm not well", "Não estou bem", "https://static.vecteezy.com/ti/fotos-gratis/t1/6783042-retrato-de-asiatico-raiva-triste-e-chora-menina-em-fundo-branco-isolado-a-emocao-de-uma-crianca-quando-birra-e-expressao-rabugenta-emocao-crianca-conceito-controle-emocional-foto.jpg"),
    ("It's too loud", "Está muito alto", "https://img.freepik.com/vetores-premium/mulher-estressada-sofre-de-barulho-alto_160308-4976.jpg"),
    ("It's cold", "Está frio", "https://thumbs.dreamstime.com/b/homem-se-sentindo-frio-durante-o-inverno-ilustra%C3%A7%C3%A3o-vetorial-do-idoso-sentir-usando-roupas-quentes-macho-s%C3%AAnior-l%C3%A1-fora-em-265328100.jpg"),
    ("It's hot", "Está quente", "https://img.freepik.com/vetores-gratis/ilustracao-de-calor-de-verao-plana-com-homem-suando-sob-o-sol_23-2149433187.jpg"),
]

BASIC_NEEDS_CARDS: list[tuple[str, str, str]] = [
    ("I want", "Eu quero", "https://img.freepik.com/vetores-premium/jovem-sorrindo-e-apontando-com-expressao-de-bullying_1639-43829.jpg?semt=ais_hybrid&w=740"),
    ("Water", "Água", "https://images.unsplash.com/photo-1523362628745-0c100150b504?w=200&h=200&fit=crop"),
    ("Food", "Comida", "https://images.unsplash.com/photo-1504674900247-0877df9cc836?w=200&h=200&fit=crop"),
    ("Bathroom", "Banheiro", "https://images.unsplash.com/photo-1620626011761-996317b8d101?w=200&h=200&fit=crop"),
    ("Help", "Ajuda", "https://images.unsplash.com/photo-1544027993-37dbfe43562a?w=200&h=200&fit=crop"),
    ("Yes", "Sim", "https://images.unsplash.com/photo-1693168058020-fd7445ff87df?w=200&h=200&fit=crop"),
    ("No", "Não", "https://images.unsplash.com/photo-1693168058063-f8e3474ce214?w=200&h=200&fit=crop"),
    ("Please", "Por favor", "https://img.freepik.com/vetores-gratis/mao-desenhada-por-favor-ilustracao_23-2150232855.jpg"),
    ("Thank you", "Obrigado", "https://img.freepik.com/vetores-premium/obrigado-ilustracao-com-personagens-de-desenhos-animados_29937-3963.jpg"),
    ("More", "Mais", "https://static.vecteezy.com/ti/vetor-gratis/p1/14215574-sinal-de-mais-verde-icone-de-simbolo-cruzado-de-orientacao-de-seguranca-vetor.jpg"),
    ("Done", "Pronto", "https://images.unsplash.com/photo-1560785496-3c9d27877182?w=200&h=200&fit=crop"),
    ("Rest", "Descansar", "https://i.pinimg.com/736x/54/c1/d1/54c1d16736785dbcba8f97f52fef8755.jpg"),
    ("I'm hungry", "Estou com fome", "https://i.pinimg.com/474x/4a/b9/db/4ab9db1ade64eee7673578b64227dc9b.jpg"),
    ("I'm thirsty", "Estou com sede", "https://s2-g1.glbimg.com/JiWgdzue9uoo_eriK99NzjPaEY0=/0x0:1000x667/984x0/smart/filters:strip_icc()/i.s3.glbimg.com/v1/AUTH_59edd422c0c84a879bd37670ae4f538a/internal_photos/bs/2019/k/0/9RCoAqRkA4OaJz3oABAQ/intestino-quiz5.jpg"),
    ("I'm tired", "Estou cansado", "https://images.unsplash.com/photo-1519003300449-424ad0405076?w=200&h=200&fit=crop"),
]

FEELINGS_CARDS: list[tuple[str, str, str]] = [
    ("Happy", "Feliz", "https://media.istockphoto.com/id/1257101256/pt/vetorial/happy-people-jumping-celebrating-victory-flat-cartoon-characters-illustration.jpg?s=612x612&w=0&k=20&c=bA6NnvE5bjKBmPc0zTRs14j-pK8Rw8LMMtrnZ32Phfk="),
    ("Sad", "Triste", "https://images.unsplash.com/photo-1541199249251-f713e6145474?w=200&h=200&fit=crop"),
    ("Angry", "Bravo", "https://img.freepik.com/fotos-gratis/conceito-de-pessoas-e-agressao-jovem-modelo-irritada-com-penteado-curto-vestida-com-roupas-casuais-fecha-os-punhos-de-raiva-briga-com-o-marido_273609-3726.jpg"),
    ("Tired", "Cansado", "https://images.unsplash.com/photo-1519003300449-424ad0405076?w=200&h=200&fit=crop"),
    ("Scared", "Com medo", "https://conteudo.imguol.com.br/c/entretenimento/de/2021/02/04/medo-angustia-assustado-1612470058401_v2_1920x1297.jpg"),
    ("Excited", "Animado", "https://i.pinimg.com/736x/32/ac/03/32ac031b76191563054ffcfd760d8cdb.jpg"),
    ("In pain", "Com dor", "https://assets-sitesdigitais.dasa.com.br/strapi/sentir-dor_c92e50597a/sentir-dor_c92e50597a.jpg"),
    ("Bored", "Entediado", "https://www.shutterstock.com/image-photo/tired-student-portrait-bored-kid-260nw-2509001737.jpg"),
    ("Nervous", "Nervoso", "https://thumbs.dreamstime.com/b/cara-assustado-da-coberta-do-menino-terrificado-na-ocasional-equipamento-com-ambas-as-m%C3%A3os-e-vista-c%C3%A2mera-atrav%C3%A9s-dos-dedos-ao-142535480.jpg"),
    ("Embarrassed", "Envergonhado", "https://i.pinimg.com/736x/42/1d/18/421d18c6f8e139af122d337b199790fa.jpg"),
    ("Grateful", "Agradecido", "https://st3.depositphotos.com/9795234/15162/i/450/depositphotos_151620720-stock-photo-young-woman-showing-her-heartfelt.jpg"),
    ("Calm", "Calmo", "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQyDr8ID798UFeHSytCdBxPluxY2no4Z0KMmw&s"),
]

ACTIONS_CARDS: list[tuple[str, str, str]] = [
    ("Go", "Ir", "https://i.pinimg.com/736x/69/99/a0/6999a0e1959afb5741b718abf1613c70.jpg"),
    ("Stop", "Parar", "https://us.123rf.com/450wm/erika8213/erika82132203/erika8213220300006/182705026-mulheres-violentas-e-abusadas-conceito-parar-a-viol%C3%AAncia-dom%C3%A9stica-contra-as-mulheres-e-o-tr%C3%A1fico.jpg?ver=6"),
    ("Play", "Brincar", "https://images.unsplash.com/photo-1535572290543-960a8046f5af?w=200&h=200&fit=crop"),
    ("Eat", "Comer", "https://i.pinimg.com/736x/ec/ad/3f/ecad3f0dc689c36600004d75b2694cd2.jpg"),
    ("Drink", "Beber", "https://i.pinimg.com/736x/be/6f/68/be6f68f66cc29466ac710f54e2ab3a94.jpg"),
    ("Sleep", "Dormir", "https://i.pinimg.com/736x/8a/83/f9/8a83f9d2acc18d62874c8a2aa4e050ce.jpg"),
    ("Read", "Ler", "https://images.unsplash.com/photo-1507842217343-583bb7270b66?w=200&h=200&fit=crop"),
    ("Write", "Escrever", "https://img.freepik.com/vetores-gratis/mao-humana-com-caneta-escrevendo-em-papel_1308-116604.jpg?semt=ais_hybrid&w=740"),
    ("Walk", "Caminhar", "https://images.theconversation.com/files/638645/original/file-20241206-15-bbhuk5.jpg?ixlib=rb-4.1.0&rect=11%2C0%2C7337%2C4902&q=20&auto=format&w=320&fit=clip&dpr=2&usm=12&cs=strip"),
    ("Sit", "Sentar", "https://previews.123rf.com/images/verkoka/verkoka1403/verkoka140300110/27156722-ni%C3%B1o-sentado-en-la-silla-aislados-en-blanco.jpg"),
    ("Stand up", "Levantar", "https://images.unsplash.com/photo-1459347268516-3ed71100e718?w=200&h=200&fit=crop"),
    ("Wait", "Esperar", "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcS8uUwZO0aOvY1OgJSJ1nHCPpLoRnDbbxt0fFFXe3jNOq0lfUCjYIsjMqS2F2Jj6s9SQuQ&usqp=CAU"),
    ("Watch TV", "Ver TV", "https://images.unsplash.com/photo-1574375927938-d5a98e8ffe85?w=200&h=200&fit=crop"),
    ("Listen to music", "Escutar música", "https://images.unsplash.com/photo-1511671782779-c97d3d27a1d4?w=200&h=200&fit=crop"),
    ("Study", "Estudar", "https://images.unsplash.com/photo-1503676260728-1c00da094a0b?w=200&h=200&fit=crop"),
    ("Take a shower", "Tomar banho", "https://images.unsplash.com/photo-1556228720-195a672e8a03?w=200&h=200&fit=crop"),
    ("Brush teeth", "Escovar dentes", "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcQG0EwEZdgh6teYLygAhRng9b_O_eeK5oawzwOswVhaRbqOe6tpOGSp2k7J0tTTIlmlmZA&usqp=CAU"),
    ("Use phone", "Usar o celular", "https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?w=200&h=200&fit=crop"),
]

PRONOUNS_CARDS: list[tuple[str, str, str]] = [
    ("I", "Eu", "https://images.unsplash.com/photo-1544168190-79c17527004f?w=200&h=200&fit=crop"),
    ("You", "Você", "https://images.unsplash.com/photo-1522529599102-193c0d76b5b6?w=200&h=200&fit=crop"),
    ("He", "Ele", "https://images.unsplash.com/photo-1519085360753-af0119f7cbe7?w=200&h=200&fit=crop"),
    ("She", "Ela", "https://images.unsplash.com/photo-1487412720507-e7ab37603c6f?w=200&h=200&fit=crop"),
    ("We", "Nós", "https://images.unsplash.com/photo-1529156069898-49953e39b3ac?w=200&h=200&fit=crop"),
    ("They", "Eles", "https://images.unsplash.com/photo-1529333166437-7750a6dd5a70?w=200&h=200&fit=crop"),
    ("My", "Meu", "https://images.unsplash.com/photo-1544168190-79c17527004f?w=200&h=200&fit=crop"),
    ("My", "Minha", "https://images.unsplash.com/photo-1544168190-79c17527004f?w=200&h=200&fit=crop"),
    ("Your", "Seu", "https://images.unsplash.com/photo-1522529599102-193c0d76b5b6?w=200&h=200&fit=crop"),
    ("Your", "Sua", "https://images.unsplash.com/photo-1522529599102-193c0d76b5b6?w=200&h=200&fit=crop"),
    ("With me", "Comigo", "https://images.unsplash.com/photo-1544168190-79c17527004f?w=200&h=200&fit=crop"),
    ("With you", "Com você", "https://images.unsplash.com/photo-1522529599102-193c0d76b5b6?w=200&h=200&fit=crop"),
]

PLACES_CARDS: list[tuple[str, str, str]] = [
    ("Home", "Casa", "https://images.unsplash.com/photo-1560518883-ce09059eeffa?w=200&h=200&fit=crop"),
    ("School", "Escola", "https://images.unsplash.com/photo-1580582932707-520aed937b7b?w=200&h=200&fit=crop"),
    ("Hospital", "Hospital", "https://images.unsplash.com/photo-1576091160399-112ba8d25d1d?w=200&h=200&fit=crop"),
    ("Room", "Quarto", "https://images.unsplash.com/photo-1586023492125-27b2c045efd7?w=200&h=200&fit=crop"),
    ("Living Room", "Sala", "https://images.unsplash.com/photo-1555041469-a586c61ea9bc?w=200&h=200&fit=crop"),
    ("Kitchen", "Cozinha", "https://images.unsplash.com/photo-1556911220-bff31c812dba?w=200&h=200&fit=crop"),
    ("Bathroom", "Banheiro", "https://images.unsplash.com/photo-1564540583246-934409427776?w=200&h=200&fit=crop"),
    ("Park", "Parque", "https://brubrinq.com.br/wp-content/uploads/2022/10/parque-infantil-1.jpg"),
    ("Car", "Carro", "https://images.unsplash.com/photo-1503376780353-7e6692767b70?w=200&h=200&fit=crop"),
    ("Street", "Rua", "https://images.unsplash.com/photo-1519501025264-65ba15a82390?w=200&h=200&fit=crop"),
    ("Store", "Loja", "https://images.unsplash.com/photo-1607082348824-0a96f2a4b9da?w=200&h=200&fit=crop"),
    ("Pharmacy", "Farmácia", "https://idec.org.br/sites/default/files/dicasedireitos/imagem_noticia_1_0.png"),
]

SEED_CATEGORIES: list[CategoryCreate] = [
    CategoryCreate(name="Basic Needs", name_portuguese="Necessidades Básicas", icon="home", display_order=1),
    CategoryCreate(name="Feelings", name_portuguese="Sentimentos", icon="emoji_emotions", display_order=2),
    CategoryCreate(name="Actions", name_portuguese="Ações", icon="directions_run", display_order=3),
    CategoryCreate(name="Places", name_portuguese="Lugares", icon="place", display_order=4),
    CategoryCreate(name="Pronouns", name_portuguese="Pronomes", icon="person", display_order=5),
    CategoryCreate(name="Expressions and Needs", name_portuguese="Expressões e Necessidades", icon="chat", display_order=6),
]

# Cards are inserted in this category order, which fixes card ids.
SEED_CARDS: list[tuple[str, list[tuple[str, str, str]]]] = [
    ("Expressions and Needs", EXPRESSIONS_CARDS),
    ("Basic Needs", BASIC_NEEDS_CARDS),
    ("Feelings", FEELINGS_CARDS),
    ("Actions", ACTIONS_CARDS),
    ("Pronouns", PRONOUNS_CARDS),
    ("Places", PLACES_CARDS),
]


def seed_catalog(store: "CatalogStore") -> None:
    """
    Populate a store with the built-in catalog.

    Seed records are trusted and skip the strict card validation,
    but receive the same defaults as created records.
    """
    category_ids: dict[str, int] = {}
    for category in SEED_CATEGORIES:
        category_ids[category.name] = store.add_category(category).id

    for category_name, cards in SEED_CARDS:
        category_id = category_ids[category_name]
        for order, (label, label_portuguese, image_url) in enumerate(cards, start=1):
            store.add_card(
                CardCreate(
                    category_id=category_id,
                    label=label,
                    label_portuguese=label_portuguese,
                    image_url=image_url,
                    display_order=order,
                )
            )
